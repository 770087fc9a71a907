"""
월 달력 뷰 상태 엔진
"""
from typing import Any, List, Optional, Tuple

from core.domain.errors import MissingDateImplError
from core.domain.models import CalendarCell, DateFormats, DateRange, MonthGrid, RangeState, Weekday
from core.domain.signals import Signal
from core.ports.date_ports import DateAdapterPort
from core.ports.utility_ports import LoggerPort
from core.services.month_grid_builder import DateFilter, MonthGridBuilder
from core.services.range_state_tracker import RangeStateTracker


class MonthView:
    """
    한 달 분량의 날짜 선택 상태를 관리하는 엔진

    원칙:
    - 입력 값(활성 월, 선택일, 구간, 미리보기 구간, 모드, 필터)만 외부에서 설정
    - 파생 상태(그리드, 마커, 라벨)는 setter 호출 안에서 즉시 전부 재계산
    - 렌더링은 하지 않고, 사용자 선택은 시그널로만 알림

    시그널:
    - selected_change(date): 날짜 선택
    - user_selection(): 단일 선택 모드에서 사용자가 다른 날짜를 확정
    - changed(): 파생 상태 재계산 완료
    """

    def __init__(
        self,
        date_adapter: DateAdapterPort,
        date_formats: DateFormats,
        logger: Optional[LoggerPort] = None
    ):
        if date_adapter is None:
            raise MissingDateImplError("DateAdapter")
        if date_formats is None:
            raise MissingDateImplError("DateFormats")

        self.date_adapter = date_adapter
        self.date_formats = date_formats
        self.logger = logger

        self.grid_builder = MonthGridBuilder(date_adapter, date_formats)
        self.range_tracker = RangeStateTracker(date_adapter)

        self.selected_change = Signal("selected_change")
        self.user_selection = Signal("user_selection")
        self.changed = Signal("changed")

        # 입력 값
        self._active_date = date_adapter.today()
        self._selected = None
        self._range = DateRange()
        self._coll_range = DateRange()
        self._range_mode = False
        self._date_filter: Optional[DateFilter] = None

        # 파생 상태
        self._weekdays = self.grid_builder.weekdays()
        self._grid: Optional[MonthGrid] = None
        self._selected_day: Optional[int] = None
        self._today_day: Optional[int] = None
        self._range_state = RangeState.empty()
        self._coll_range_state = RangeState.empty()

        self.init()

    # ------------------------------------------------------------------
    # 입력 값 setter
    # ------------------------------------------------------------------

    def set_active_date(self, value: Any) -> None:
        """
        표시할 월 설정 (월/연도 외에는 무시)

        유효하지 않으면 오늘로 대체, 월/연도가 바뀐 경우에만 다시 초기화
        """
        old_active_date = self._active_date
        active_date = self._get_valid_date_or_none(value, "active_date")
        self._active_date = active_date if active_date is not None else self.date_adapter.today()

        if not self.range_tracker.has_same_month_and_year(old_active_date, self._active_date):
            self.init()

    def set_selected(self, value: Any) -> None:
        self._selected = self._get_valid_date_or_none(value, "selected")
        self._selected_day = self._get_date_in_current_month(self._selected)
        self.changed.emit()

    def set_begin_date(self, value: Any) -> None:
        self._range = DateRange(self._get_valid_date_or_none(value, "begin_date"), self._range.end)
        self._update_range_state()
        self._update_coll_range_state()
        self.changed.emit()

    def set_end_date(self, value: Any) -> None:
        self._range = DateRange(self._range.begin, self._get_valid_date_or_none(value, "end_date"))
        self._update_range_state()
        self._update_coll_range_state()
        self.changed.emit()

    def set_begin_coll_date(self, value: Any) -> None:
        self._coll_range = DateRange(
            self._get_valid_date_or_none(value, "begin_coll_date"), self._coll_range.end
        )
        self._update_coll_range_state()
        self.changed.emit()

    def set_end_coll_date(self, value: Any) -> None:
        self._coll_range = DateRange(
            self._coll_range.begin, self._get_valid_date_or_none(value, "end_coll_date")
        )
        self._update_coll_range_state()
        self.changed.emit()

    def set_range_mode(self, enabled: bool) -> None:
        self._range_mode = bool(enabled)
        self._update_range_state()
        self._update_coll_range_state()
        self.changed.emit()

    def set_date_filter(self, date_filter: Optional[DateFilter]) -> None:
        """선택 가능 날짜 필터 설정 (그리드 재생성)"""
        self._date_filter = date_filter
        self._grid = self.grid_builder.build(self._active_date, self._date_filter)
        self.changed.emit()

    # ------------------------------------------------------------------
    # 동작
    # ------------------------------------------------------------------

    def init(self) -> None:
        """파생 상태 전체 재계산"""
        self._update_range_state()
        self._update_coll_range_state()
        self._selected_day = self._get_date_in_current_month(self._selected)
        self._today_day = self._get_date_in_current_month(self.date_adapter.today())
        self._grid = self.grid_builder.build(self._active_date, self._date_filter)

        self._debug(
            f"월 뷰 초기화: {self._grid.month_label} "
            f"{self.date_adapter.get_year(self._active_date)} "
            f"(offset={self._grid.first_week_offset}, days={len(self._grid.cells)})"
        )
        self.changed.emit()

    def select_day(self, day: int) -> None:
        """
        셀 선택 처리

        구간 모드: 항상 selected_change 발생 (시작/끝 전환은 소비자 책임)
        단일 모드: 현재 선택일과 다를 때만 selected_change -> user_selection
        """
        selected_date = self.get_date_for_day(day)
        if self._range_mode:
            self.selected_change.emit(selected_date)
        elif self._selected_day != day:
            self.selected_change.emit(selected_date)
            self.user_selection.emit()

    def get_date_for_day(self, day: int) -> Any:
        """활성 월의 day 일 날짜 생성"""
        return self.date_adapter.create_date(
            self.date_adapter.get_year(self._active_date),
            self.date_adapter.get_month(self._active_date),
            day
        )

    # ------------------------------------------------------------------
    # 읽기 전용 상태
    # ------------------------------------------------------------------

    @property
    def active_date(self) -> Any:
        return self._active_date

    @property
    def selected(self) -> Any:
        return self._selected

    @property
    def begin_date(self) -> Any:
        return self._range.begin

    @property
    def end_date(self) -> Any:
        return self._range.end

    @property
    def begin_coll_date(self) -> Any:
        return self._coll_range.begin

    @property
    def end_coll_date(self) -> Any:
        return self._coll_range.end

    @property
    def range_mode(self) -> bool:
        return self._range_mode

    @property
    def date_filter(self) -> Optional[DateFilter]:
        return self._date_filter

    @property
    def grid(self) -> MonthGrid:
        return self._grid

    @property
    def weeks(self) -> Tuple[Tuple[CalendarCell, ...], ...]:
        return self._grid.weeks

    @property
    def first_week_offset(self) -> int:
        return self._grid.first_week_offset

    @property
    def month_label(self) -> str:
        return self._grid.month_label

    @property
    def weekdays(self) -> List[Weekday]:
        return list(self._weekdays)

    @property
    def selected_day(self) -> Optional[int]:
        """선택일이 활성 월에 있으면 일, 없으면 None"""
        return self._selected_day

    @property
    def today_day(self) -> Optional[int]:
        return self._today_day

    @property
    def range_state(self) -> RangeState:
        return self._range_state

    @property
    def coll_range_state(self) -> RangeState:
        return self._coll_range_state

    @property
    def begin_day(self) -> Optional[int]:
        return self._range_state.begin_day

    @property
    def end_day(self) -> Optional[int]:
        return self._range_state.end_day

    @property
    def range_full(self) -> bool:
        return self._range_state.month_fully_in_range

    @property
    def begin_coll_day(self) -> Optional[int]:
        return self._coll_range_state.begin_day

    @property
    def end_coll_day(self) -> Optional[int]:
        return self._coll_range_state.end_day

    @property
    def coll_range_full(self) -> bool:
        return self._coll_range_state.month_fully_in_range

    # ------------------------------------------------------------------
    # 내부 헬퍼
    # ------------------------------------------------------------------

    def _update_range_state(self) -> None:
        self._range_state = self.range_tracker.track(
            self._range, self._active_date, self._range_mode
        )

    def _update_coll_range_state(self) -> None:
        # 존재 여부 검사는 확정 구간(_range) 기준
        self._coll_range_state = self.range_tracker.track(
            self._coll_range, self._active_date, self._range_mode, presence=self._range
        )

    def _get_date_in_current_month(self, value: Any) -> Optional[int]:
        return self.range_tracker.get_date_in_month(value, self._active_date)

    def _get_valid_date_or_none(self, value: Any, field: str) -> Any:
        """역직렬화 후 날짜 인스턴스이면서 유효하면 반환, 아니면 None"""
        obj = self.date_adapter.deserialize(value)
        if self.date_adapter.is_date_instance(obj) and self.date_adapter.is_valid(obj):
            return obj
        if value is not None:
            self._debug(f"유효하지 않은 날짜 입력 무시: {field}={value!r}")
        return None

    def _debug(self, message: str) -> None:
        if self.logger:
            self.logger.debug(message)
