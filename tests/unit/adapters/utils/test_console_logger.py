"""
ConsoleLogger 단위 테스트
콘솔 로거 출력 검증
"""
import pytest
from io import StringIO

from rich.console import Console

from infra.adapters.utils.console_logger import ConsoleLogger


class TestConsoleLogger:
    """ConsoleLogger 단위 테스트"""

    @pytest.fixture
    def buffer(self):
        return StringIO()

    @pytest.fixture
    def logger(self, buffer):
        """ConsoleLogger 인스턴스"""
        return ConsoleLogger(console=Console(file=buffer, width=200))

    def test_info_message(self, logger, buffer):
        """info 메서드 테스트"""
        # Given
        message = "테스트 정보 메시지"

        # When
        logger.info(message)

        # Then
        output = buffer.getvalue()
        assert "[INFO]" in output
        assert message in output

    def test_warning_message(self, logger, buffer):
        """warning 메서드 테스트"""
        logger.warning("테스트 경고 메시지")

        output = buffer.getvalue()
        assert "[WARNING] 테스트 경고 메시지" in output

    def test_error_message(self, logger, buffer):
        """error 메서드 테스트"""
        logger.error("테스트 에러 메시지")

        output = buffer.getvalue()
        assert "[ERROR] 테스트 에러 메시지" in output

    def test_debug_hidden_by_default(self, logger, buffer):
        """verbose 가 아니면 debug 출력 안 함"""
        logger.debug("숨겨진 메시지")

        assert buffer.getvalue() == ""

    def test_debug_when_verbose(self, buffer):
        """verbose 모드 debug 출력"""
        logger = ConsoleLogger(console=Console(file=buffer, width=200), verbose=True)

        logger.debug("월 뷰 초기화")

        assert "[DEBUG] 월 뷰 초기화" in buffer.getvalue()

    def test_multiple_messages(self, logger, buffer):
        """여러 메시지 연속 출력 테스트"""
        logger.info("첫 번째")
        logger.warning("두 번째")
        logger.error("세 번째")

        output = buffer.getvalue()
        assert "[INFO] 첫 번째" in output
        assert "[WARNING] 두 번째" in output
        assert "[ERROR] 세 번째" in output

    def test_markup_is_not_interpreted(self, logger, buffer):
        """메시지 안의 rich 마크업은 그대로 출력"""
        message = "값 [bold]강조[/bold] @#$%"

        logger.info(message)

        assert message in buffer.getvalue()

    def test_multiline_message(self, logger, buffer):
        """여러 줄 메시지 테스트"""
        message = "첫 줄\n두 번째 줄\n세 번째 줄"

        logger.info(message)

        output = buffer.getvalue()
        assert message in output
        assert "[INFO]" in output
