"""
CLI 의존성 주입 모듈
"""
from datetime import date
from typing import Any, Callable, Dict, Optional

from config import config
from core.services.month_view import MonthView
from infra.adapters.date.native_date_adapter import NativeDateAdapter
from infra.adapters.utils.console_logger import ConsoleLogger


def build_dependencies(
    first_day_of_week: int = config.FIRST_DAY_OF_WEEK,
    verbose: bool = config.VERBOSE,
    today_provider: Optional[Callable[[], date]] = None
) -> Dict[str, Any]:
    """
    의존성 주입 컨테이너 역할

    Args:
        first_day_of_week: 주 시작 요일 (0=일요일)
        verbose: 디버그 로그 출력 여부
        today_provider: 오늘 날짜 공급 함수 (기본값: date.today)

    Returns:
        Dict: 구성된 서비스 및 어댑터 모음
    """
    # 1. 유틸리티
    logger = ConsoleLogger(verbose=verbose)

    # 2. 날짜 어댑터 + 포맷
    date_adapter = NativeDateAdapter(
        first_day_of_week=first_day_of_week,
        today_provider=today_provider
    )
    date_formats = config.get_date_formats()

    # 3. 엔진
    month_view = MonthView(
        date_adapter=date_adapter,
        date_formats=date_formats,
        logger=logger
    )

    return {
        'month_view': month_view,
        'date_adapter': date_adapter,
        'date_formats': date_formats,
        'logger': logger,
    }
