from unittest.mock import Mock

from core.domain.signals import Signal


class TestSignal:
    def test_emit_calls_handlers_in_order(self):
        signal = Signal("selected_change")
        calls = []
        signal.connect(lambda value: calls.append(("first", value)))
        signal.connect(lambda value: calls.append(("second", value)))

        signal.emit(11)

        assert calls == [("first", 11), ("second", 11)]

    def test_disconnect(self):
        signal = Signal("user_selection")
        handler = Mock()
        signal.connect(handler)

        signal.disconnect(handler)
        signal.emit()

        handler.assert_not_called()
        assert len(signal) == 0

    def test_disconnect_unknown_handler_is_ignored(self):
        signal = Signal("changed")

        signal.disconnect(Mock())

        assert len(signal) == 0

    def test_emit_without_handlers(self):
        Signal("changed").emit()
