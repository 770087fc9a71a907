class MonthViewError(Exception):
    """Base error."""


class MissingDateImplError(MonthViewError):
    """필수 협력 객체(날짜 어댑터, 포맷 설정)가 없을 때 생성 시점에 발생"""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(
            f"MonthView: No provider found for {provider}. "
            f"Pass a {provider} instance when constructing the month view."
        )
