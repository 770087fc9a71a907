"""
구간 상태 계산 서비스
"""
from typing import Any, Optional

from core.domain.models import DateRange, RangeState
from core.ports.date_ports import DateAdapterPort


class RangeStateTracker:
    """
    활성 월 기준 구간의 시작/종료일과 '월 전체 포함' 여부 계산

    월 전체가 구간 안에 있으면 양 끝점은 이 달에 없고,
    활성 월의 대표 날짜는 두 끝점 사이에 있음
    """

    def __init__(self, date_adapter: DateAdapterPort):
        self.date_adapter = date_adapter

    def track(
        self,
        date_range: DateRange,
        active_date: Any,
        range_mode: bool,
        presence: Optional[DateRange] = None
    ) -> RangeState:
        """
        구간 상태 계산

        Args:
            date_range: 대상 구간
            active_date: 활성 월 (월/연도만 의미 있음)
            range_mode: 구간 선택 모드 여부
            presence: 시작/종료 존재 여부 검사에 쓸 구간 (기본값: date_range)
        """
        if not range_mode:
            return RangeState.empty()

        if presence is None:
            presence = date_range
        begin_day = self.get_date_in_month(date_range.begin, active_date)
        end_day = self.get_date_in_month(date_range.end, active_date)

        month_fully_in_range = (
            presence.is_complete
            and date_range.is_complete
            and begin_day is None
            and end_day is None
            and self.date_adapter.compare_date(date_range.begin, active_date) <= 0
            and self.date_adapter.compare_date(active_date, date_range.end) <= 0
        )

        return RangeState(
            begin_day=begin_day,
            end_day=end_day,
            month_fully_in_range=bool(month_fully_in_range)
        )

    def get_date_in_month(self, value: Any, active_date: Any) -> Optional[int]:
        """value 가 활성 월에 속하면 일(day), 아니면 None"""
        if self.has_same_month_and_year(value, active_date):
            return self.date_adapter.get_date(value)
        return None

    def has_same_month_and_year(self, first: Any, second: Any) -> bool:
        """두 날짜가 모두 있고 같은 연도/월인지"""
        return bool(
            first is not None
            and second is not None
            and self.date_adapter.get_month(first) == self.date_adapter.get_month(second)
            and self.date_adapter.get_year(first) == self.date_adapter.get_year(second)
        )
