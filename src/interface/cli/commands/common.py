"""
명령 공용 헬퍼 (입력 파싱, 뷰 구성)
"""
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.theme import Theme

# 커스텀 테마 정의
custom_theme = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
})

console = Console(theme=custom_theme)

MONTH_FORMAT = "%Y-%m"


def parse_option_date(deps: Dict[str, Any], value: Optional[str], option: str, parse_format: Optional[str] = None):
    """옵션 문자열을 날짜로 변환, 잘못된 값이면 종료 코드 1"""
    if value is None:
        return None

    adapter = deps['date_adapter']
    parse_format = parse_format or deps['date_formats'].parse.date_input
    parsed = adapter.parse(value, parse_format)
    if parsed is None or not adapter.is_valid(parsed):
        console.print(f"[error]❌ {option} 형식이 잘못되었습니다:[/error] {value} (형식: {parse_format})")
        raise typer.Exit(code=1)
    return parsed


def configure_month_view(
    deps: Dict[str, Any],
    month: Optional[str],
    selected: Optional[str],
    begin: Optional[str],
    end: Optional[str],
    range_mode: bool
):
    """CLI 옵션을 MonthView 입력 값으로 반영"""
    view = deps['month_view']

    active_date = parse_option_date(deps, month, "--month", MONTH_FORMAT)
    selected_date = parse_option_date(deps, selected, "--selected")
    begin_date = parse_option_date(deps, begin, "--begin")
    end_date = parse_option_date(deps, end, "--end")

    # 모드를 먼저 켜야 구간 상태가 계산됨
    view.set_range_mode(range_mode)
    view.set_active_date(active_date)
    view.set_selected(selected_date)
    view.set_begin_date(begin_date)
    view.set_end_date(end_date)
    return view
