"""
콘솔 로거 어댑터
"""
from typing import Optional

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from core.ports.utility_ports import LoggerPort

# 커스텀 테마 정의
LOG_THEME = Theme({
    "debug": "dim",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
})


class ConsoleLogger(LoggerPort):
    """
    rich 콘솔 출력 로거 구현

    "[LEVEL] message" 형식으로 출력
    debug 는 verbose 모드에서만 출력
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        if console is None:
            console = Console(theme=LOG_THEME)
        else:
            console.push_theme(LOG_THEME)
        self.console = console
        self.verbose = verbose

    def debug(self, message: str) -> None:
        """디버그 로그"""
        if self.verbose:
            self._write("DEBUG", "debug", message)

    def info(self, message: str) -> None:
        """정보 로그"""
        self._write("INFO", "info", message)

    def warning(self, message: str) -> None:
        """경고 로그"""
        self._write("WARNING", "warning", message)

    def error(self, message: str) -> None:
        """에러 로그"""
        self._write("ERROR", "error", message)

    def _write(self, level: str, style: str, message: str) -> None:
        # 메시지 안의 [..] 가 rich 마크업으로 해석되지 않도록 Text 로 조립
        self.console.print(Text.assemble((f"[{level}]", style), " ", message))
