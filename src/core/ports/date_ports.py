"""
날짜 연산 포트 (달력 계산 기능)
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

D = TypeVar("D")


class DateAdapterPort(ABC, Generic[D]):
    """
    달력 연산 인터페이스

    규칙:
    - 월은 1~12
    - 요일 인덱스는 0=일요일 ... 6=토요일
    - today() 를 제외한 모든 메서드는 순수 함수
    """

    @abstractmethod
    def today(self) -> D:
        """오늘 날짜"""
        pass

    @abstractmethod
    def deserialize(self, value: Any) -> Optional[Any]:
        """직렬화된 값(문자열 등)을 날짜로 변환, 변환 불가 시 유효하지 않은 날짜"""
        pass

    @abstractmethod
    def parse(self, value: Any, parse_format: str) -> Optional[D]:
        """포맷 문자열로 파싱"""
        pass

    @abstractmethod
    def is_date_instance(self, obj: Any) -> bool:
        pass

    @abstractmethod
    def is_valid(self, date: D) -> bool:
        pass

    @abstractmethod
    def get_year(self, date: D) -> int:
        pass

    @abstractmethod
    def get_month(self, date: D) -> int:
        pass

    @abstractmethod
    def get_date(self, date: D) -> int:
        pass

    @abstractmethod
    def get_day_of_week(self, date: D) -> int:
        pass

    @abstractmethod
    def get_first_day_of_week(self) -> int:
        pass

    @abstractmethod
    def get_num_days_in_month(self, date: D) -> int:
        pass

    @abstractmethod
    def create_date(self, year: int, month: int, day: int) -> D:
        pass

    @abstractmethod
    def compare_date(self, first: D, second: D) -> int:
        """first < second 이면 -1, 같으면 0, 크면 1"""
        pass

    @abstractmethod
    def get_month_names(self, style: str) -> List[str]:
        """style: long | short | narrow (1월부터 12개)"""
        pass

    @abstractmethod
    def get_day_of_week_names(self, style: str) -> List[str]:
        """style: long | short | narrow (일요일부터 7개)"""
        pass

    @abstractmethod
    def get_date_names(self) -> List[str]:
        """일(1~31) 표시 문자열"""
        pass

    @abstractmethod
    def format(self, date: D, display_format: str) -> str:
        pass
