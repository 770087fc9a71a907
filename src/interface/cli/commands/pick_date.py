from typing import Optional

import typer

from config import config
from interface.cli.commands.common import configure_month_view, console
from interface.cli.dependencies import build_dependencies


def pick_date(
    day: int = typer.Argument(..., help="선택할 일 (1~31)"),
    month: Optional[str] = typer.Option(None, "--month", "-m", help="대상 월 (YYYY-MM), 기본값: 이번 달"),
    selected: Optional[str] = typer.Option(None, "--selected", "-s", help="현재 선택일 (YYYY-MM-DD)"),
    range_mode: bool = typer.Option(False, "--range/--single", help="구간 선택 모드"),
    verbose: bool = typer.Option(config.VERBOSE, "--verbose/--quiet", help="디버그 로그 출력"),
):
    """
    날짜 셀 선택 시뮬레이션

    지정한 일을 선택했을 때 발생하는 이벤트를 순서대로 출력합니다.
    """
    deps = build_dependencies(verbose=verbose)
    view = configure_month_view(deps, month, selected, None, None, range_mode)

    days_in_month = len(view.grid.cells)
    if day < 1 or day > days_in_month:
        console.print(f"[error]❌ 잘못된 일:[/error] {day} (1~{days_in_month})")
        raise typer.Exit(code=1)

    adapter = deps['date_adapter']
    display_format = deps['date_formats'].display.date_input
    events = []

    view.selected_change.connect(
        lambda value: events.append(f"selected_change: {adapter.format(value, display_format)}")
    )
    view.user_selection.connect(lambda: events.append("user_selection"))

    view.select_day(day)

    if not events:
        console.print("[warning]ℹ️  이벤트 없음 (이미 선택된 날짜)[/warning]")
        return

    for event in events:
        console.print(f"[success]📅 {event}[/success]")
