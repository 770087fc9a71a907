"""
datetime.date 기반 날짜 어댑터
"""
import calendar
from datetime import date, datetime
from typing import Any, Callable, List, Optional

import pandas as pd

from core.ports.date_ports import DateAdapterPort

DAYS_PER_WEEK = 7
NAME_STYLES = ("long", "short", "narrow")


class NativeDateAdapter(DateAdapterPort[date]):
    """
    표준 date 객체를 사용하는 어댑터 구현

    - 문자열 변환은 pandas.to_datetime 사용
    - 변환 불가 값은 pd.NaT (날짜 인스턴스이지만 유효하지 않음)
    - 월/요일 이름은 calendar 모듈 (프로세스 로케일)
    """

    def __init__(
        self,
        first_day_of_week: int = 0,
        today_provider: Optional[Callable[[], date]] = None
    ):
        self.first_day_of_week = first_day_of_week % DAYS_PER_WEEK
        self.today_provider = today_provider or date.today

    def today(self) -> date:
        return self.today_provider()

    def deserialize(self, value: Any) -> Optional[Any]:
        """
        입력 값을 date 로 변환

        None, 빈 문자열 -> None
        datetime -> date
        문자열 -> pandas 파싱 (실패 시 pd.NaT)
        그 외 -> 그대로 반환 (is_date_instance 에서 걸러짐)
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return pd.NaT if pd.isna(value) else value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            if not value.strip():
                return None
            parsed = pd.to_datetime(value.strip(), errors="coerce")
            if pd.isna(parsed):
                return pd.NaT
            return parsed.date()
        return value

    def parse(self, value: Any, parse_format: str) -> Optional[Any]:
        """strftime 포맷으로 파싱 (실패 시 pd.NaT)"""
        if value is None or value == "":
            return None
        if isinstance(value, date):
            return self.deserialize(value)
        try:
            return datetime.strptime(str(value).strip(), parse_format).date()
        except ValueError:
            return pd.NaT

    def is_date_instance(self, obj: Any) -> bool:
        return isinstance(obj, date)

    def is_valid(self, value: date) -> bool:
        return not pd.isna(value)

    def get_year(self, value: date) -> int:
        return value.year

    def get_month(self, value: date) -> int:
        return value.month

    def get_date(self, value: date) -> int:
        return value.day

    def get_day_of_week(self, value: date) -> int:
        # date.weekday(): 월=0 -> 일=0 기준으로 변환
        return (value.weekday() + 1) % DAYS_PER_WEEK

    def get_first_day_of_week(self) -> int:
        return self.first_day_of_week

    def get_num_days_in_month(self, value: date) -> int:
        return calendar.monthrange(value.year, value.month)[1]

    def create_date(self, year: int, month: int, day: int) -> date:
        if month < 1 or month > 12:
            raise ValueError(f'Invalid month index "{month}". Month index has to be between 1 and 12.')
        if day < 1:
            raise ValueError(f'Invalid date "{day}". Date has to be greater than 0.')
        days_in_month = calendar.monthrange(year, month)[1]
        if day > days_in_month:
            raise ValueError(f'Invalid date "{day}" for month with index "{month}".')
        return date(year, month, day)

    def compare_date(self, first: date, second: date) -> int:
        a = (first.year, first.month, first.day)
        b = (second.year, second.month, second.day)
        return (a > b) - (a < b)

    def get_month_names(self, style: str) -> List[str]:
        self._check_style(style)
        long_names = list(calendar.month_name)[1:]
        if style == "long":
            return long_names
        if style == "short":
            return list(calendar.month_abbr)[1:]
        return [name[:1] for name in long_names]

    def get_day_of_week_names(self, style: str) -> List[str]:
        self._check_style(style)
        # calendar 모듈은 월요일 시작 -> 일요일 시작으로 회전
        source = calendar.day_name if style == "long" else calendar.day_abbr
        names = [source[(i + 6) % DAYS_PER_WEEK] for i in range(DAYS_PER_WEEK)]
        if style == "narrow":
            return [name[:1] for name in names]
        return names

    def get_date_names(self) -> List[str]:
        return [str(day) for day in range(1, 32)]

    def format(self, value: date, display_format: str) -> str:
        if not self.is_date_instance(value) or not self.is_valid(value):
            raise ValueError("Cannot format invalid date.")
        return value.strftime(display_format)

    def _check_style(self, style: str) -> None:
        if style not in NAME_STYLES:
            raise ValueError(f"Unknown name style: {style} (expected one of {', '.join(NAME_STYLES)})")
