"""
월 그리드 생성 서비스
"""
from typing import Any, Callable, List, Optional

from core.domain.models import CalendarCell, DateFormats, MonthGrid, Weekday
from core.ports.date_ports import DateAdapterPort

DAYS_PER_WEEK = 7

DateFilter = Callable[[Any], bool]


class MonthGridBuilder:
    """
    활성 월을 주 단위 셀 그리드로 변환

    규칙:
    - 셀은 1일 ~ 말일만 생성 (빈 칸 셀 없음)
    - 첫 주 앞의 빈 칸은 first_week_offset 으로 표현
    - 주 시작 요일은 어댑터 설정(get_first_day_of_week)을 따름
    """

    def __init__(self, date_adapter: DateAdapterPort, date_formats: DateFormats):
        self.date_adapter = date_adapter
        self.date_formats = date_formats

    def build(self, active_date: Any, date_filter: Optional[DateFilter] = None) -> MonthGrid:
        """활성 월 그리드 생성"""
        offset = self.first_week_offset(active_date)
        return MonthGrid(
            weeks=self._create_week_cells(active_date, offset, date_filter),
            first_week_offset=offset,
            month_label=self.month_label(active_date)
        )

    def first_week_offset(self, active_date: Any) -> int:
        """1일 앞의 빈 칸 수 (0~6)"""
        adapter = self.date_adapter
        first_of_month = adapter.create_date(
            adapter.get_year(active_date), adapter.get_month(active_date), 1
        )
        return (
            DAYS_PER_WEEK + adapter.get_day_of_week(first_of_month) - adapter.get_first_day_of_week()
        ) % DAYS_PER_WEEK

    def month_label(self, active_date: Any) -> str:
        """짧은 월 이름 대문자 (예: MAR)"""
        names = self.date_adapter.get_month_names("short")
        return names[self.date_adapter.get_month(active_date) - 1].upper()

    def weekdays(self) -> List[Weekday]:
        """주 시작 요일 기준으로 회전한 요일 헤더"""
        first_day_of_week = self.date_adapter.get_first_day_of_week()
        long_names = self.date_adapter.get_day_of_week_names("long")
        narrow_names = self.date_adapter.get_day_of_week_names("narrow")

        weekdays = [Weekday(long=long, narrow=narrow) for long, narrow in zip(long_names, narrow_names)]
        return weekdays[first_day_of_week:] + weekdays[:first_day_of_week]

    def _create_week_cells(self, active_date: Any, offset: int, date_filter: Optional[DateFilter]):
        adapter = self.date_adapter
        year = adapter.get_year(active_date)
        month = adapter.get_month(active_date)
        days_in_month = adapter.get_num_days_in_month(active_date)
        date_names = adapter.get_date_names()

        weeks: List[List[CalendarCell]] = [[]]
        column = offset
        for day in range(1, days_in_month + 1):
            if column == DAYS_PER_WEEK:
                weeks.append([])
                column = 0

            cell_date = adapter.create_date(year, month, day)
            enabled = date_filter is None or bool(date_filter(cell_date))
            aria_label = adapter.format(cell_date, self.date_formats.display.date_a11y_label)
            weeks[-1].append(CalendarCell(day, date_names[day - 1], aria_label, enabled))
            column += 1

        return tuple(tuple(week) for week in weeks)
