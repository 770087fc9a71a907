"""
월 달력 뷰 설정
"""
import os

from core.domain.models import DateFormats, DisplayFormats, ParseFormats


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """
    환경 변수 기반 설정

    요일 인덱스: 0=일요일 ... 6=토요일
    날짜 포맷: strftime 패턴
    """

    def __init__(self):
        self.FIRST_DAY_OF_WEEK = int(os.getenv("MONTHVIEW_FIRST_DAY_OF_WEEK", "0")) % 7
        self.VERBOSE = _env_bool("MONTHVIEW_VERBOSE", False)

        self.PARSE_DATE_INPUT = os.getenv("MONTHVIEW_PARSE_DATE_INPUT", "%Y-%m-%d")
        self.DISPLAY_DATE_INPUT = os.getenv("MONTHVIEW_DISPLAY_DATE_INPUT", "%Y-%m-%d")
        self.MONTH_YEAR_LABEL = os.getenv("MONTHVIEW_MONTH_YEAR_LABEL", "%b %Y")
        self.DATE_A11Y_LABEL = os.getenv("MONTHVIEW_DATE_A11Y_LABEL", "%d %B %Y")
        self.MONTH_YEAR_A11Y_LABEL = os.getenv("MONTHVIEW_MONTH_YEAR_A11Y_LABEL", "%B %Y")

    def get_date_formats(self) -> DateFormats:
        """현재 설정으로 DateFormats 생성"""
        return DateFormats(
            parse=ParseFormats(date_input=self.PARSE_DATE_INPUT),
            display=DisplayFormats(
                date_input=self.DISPLAY_DATE_INPUT,
                month_year_label=self.MONTH_YEAR_LABEL,
                date_a11y_label=self.DATE_A11Y_LABEL,
                month_year_a11y_label=self.MONTH_YEAR_A11Y_LABEL,
            ),
        )


config = Config()
