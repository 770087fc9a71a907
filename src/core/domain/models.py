# src/core/domain/models.py
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class CalendarCell:
    """
    월 그리드의 날짜 셀 하나
    """
    value: int                  # 일 (1~31)
    display_value: str          # 표시 텍스트
    aria_label: str             # 접근성 라벨
    enabled: bool               # 선택 가능 여부


@dataclass(frozen=True)
class Weekday:
    """요일 헤더 이름"""
    long: str
    narrow: str


@dataclass(frozen=True)
class DateRange:
    """
    날짜 구간 (시작/끝 모두 비어 있을 수 있음)
    """
    begin: Optional[Any] = None
    end: Optional[Any] = None

    @property
    def is_complete(self) -> bool:
        return self.begin is not None and self.end is not None


@dataclass(frozen=True)
class RangeState:
    """
    활성 월 기준으로 계산된 구간 상태
    """
    begin_day: Optional[int]        # 구간 시작일 (다른 달이면 None)
    end_day: Optional[int]          # 구간 종료일 (다른 달이면 None)
    month_fully_in_range: bool      # 월 전체가 구간 안에 있는지

    @classmethod
    def empty(cls) -> "RangeState":
        return cls(begin_day=None, end_day=None, month_fully_in_range=False)


@dataclass(frozen=True)
class MonthGrid:
    """
    주 단위 셀 그리드

    첫 주의 빈 칸은 셀로 만들지 않고 first_week_offset 으로만 표현
    """
    weeks: Tuple[Tuple[CalendarCell, ...], ...]
    first_week_offset: int          # 1일 앞의 빈 칸 수 (0~6)
    month_label: str

    @property
    def cells(self) -> List[CalendarCell]:
        return [cell for week in self.weeks for cell in week]

    @property
    def days(self) -> List[int]:
        return [cell.value for cell in self.cells]


@dataclass(frozen=True)
class ParseFormats:
    date_input: str


@dataclass(frozen=True)
class DisplayFormats:
    date_input: str
    month_year_label: str
    date_a11y_label: str
    month_year_a11y_label: str


@dataclass(frozen=True)
class DateFormats:
    """
    날짜 어댑터와 짝을 이루는 포맷 설정
    """
    parse: ParseFormats
    display: DisplayFormats
