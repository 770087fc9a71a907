"""
유틸리티 포트
"""
from abc import ABC, abstractmethod


class LoggerPort(ABC):
    """로깅 인터페이스"""

    @abstractmethod
    def debug(self, message: str) -> None:
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        pass
