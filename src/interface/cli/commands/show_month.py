from typing import List, Optional

import typer
from rich.table import Table
from rich.text import Text

from config import config
from core.domain.models import CalendarCell
from core.services.month_view import MonthView
from interface.cli.commands.common import configure_month_view, console
from interface.cli.dependencies import build_dependencies

DAYS_PER_WEEK = 7
WEEKEND_DAYS = (0, 6)  # 일, 토


def show_month(
    month: Optional[str] = typer.Option(None, "--month", "-m", help="표시할 월 (YYYY-MM), 기본값: 이번 달"),
    selected: Optional[str] = typer.Option(None, "--selected", "-s", help="선택일 (YYYY-MM-DD)"),
    begin: Optional[str] = typer.Option(None, "--begin", "-b", help="구간 시작일 (YYYY-MM-DD)"),
    end: Optional[str] = typer.Option(None, "--end", "-e", help="구간 종료일 (YYYY-MM-DD)"),
    range_mode: bool = typer.Option(False, "--range/--single", help="구간 선택 모드"),
    first_day: int = typer.Option(config.FIRST_DAY_OF_WEEK, "--first-day", "-f", min=0, max=6, help="주 시작 요일 (0=일요일)"),
    no_weekends: bool = typer.Option(False, "--no-weekends", help="주말 선택 불가"),
    verbose: bool = typer.Option(config.VERBOSE, "--verbose/--quiet", help="디버그 로그 출력"),
):
    """
    월 달력 출력

    오늘(밑줄), 선택일(반전), 구간(초록) 표시와 함께 한 달을 그립니다.
    """
    deps = build_dependencies(first_day_of_week=first_day, verbose=verbose)
    view = configure_month_view(deps, month, selected, begin, end, range_mode)

    if no_weekends:
        adapter = deps['date_adapter']
        view.set_date_filter(lambda d: adapter.get_day_of_week(d) not in WEEKEND_DAYS)

    console.print(render_month(view))

    if range_mode and view.range_full:
        console.print("[success]✅ 월 전체가 구간 안에 있습니다[/success]")


def render_month(view: MonthView) -> Table:
    """MonthView 파생 상태를 rich 테이블로 변환"""
    year = view.date_adapter.get_year(view.active_date)
    table = Table(title=f"{view.month_label} {year}", show_lines=False)
    for weekday in view.weekdays:
        table.add_column(weekday.narrow, justify="right")

    for index, week in enumerate(view.weeks):
        row: List[Text] = []
        if index == 0:
            row.extend(Text("") for _ in range(view.first_week_offset))
        row.extend(Text(cell.display_value, style=cell_style(view, cell)) for cell in week)
        row.extend(Text("") for _ in range(DAYS_PER_WEEK - len(row)))
        table.add_row(*row)

    return table


def cell_style(view: MonthView, cell: CalendarCell) -> str:
    styles = []
    if not cell.enabled:
        styles.append("dim strike")
    if cell.value == view.today_day:
        styles.append("underline")
    if cell.value == view.selected_day:
        styles.append("reverse")
    if cell.value in (view.begin_day, view.end_day):
        styles.append("bold green")
    elif is_in_range(view, cell.value):
        styles.append("green")
    return " ".join(styles)


def is_in_range(view: MonthView, day: int) -> bool:
    """day 가 확정 구간 안에 있는지 (양 끝 포함)"""
    if not view.range_mode or view.begin_date is None or view.end_date is None:
        return False
    if view.range_full:
        return True

    begin_day, end_day = view.begin_day, view.end_day
    if begin_day is not None and end_day is not None:
        return begin_day <= day <= end_day
    # 한쪽 끝만 이 달에 있는 경우
    if begin_day is not None:
        return day >= begin_day
    if end_day is not None:
        return day <= end_day
    return False
