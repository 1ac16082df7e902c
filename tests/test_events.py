from unittest.mock import MagicMock, patch

import pytest

from coreason_aem_client.events import ClientEvent, CompositeEmitter, EventCollector, EventType, LoguruEmitter


def test_client_event_creation() -> None:
    """Test event fields and defaults."""
    event = ClientEvent(type=EventType.CHECK_ATTEMPT, message="Install check #1", payload={"attempt": 1})
    assert event.type == EventType.CHECK_ATTEMPT
    assert event.message == "Install check #1"
    assert event.payload == {"attempt": 1}
    assert isinstance(event.timestamp, float)


def test_loguru_emitter_emit() -> None:
    """Test log levels chosen by the Loguru emitter."""
    emitter = LoguruEmitter()

    with patch("coreason_aem_client.events.logger") as mock_logger:
        emitter.emit(ClientEvent(type=EventType.CHECK_ATTEMPT, message="Install check #1"))
        mock_logger.info.assert_called_once()
        args, _ = mock_logger.info.call_args
        assert "[check_attempt]" in args[0]
        assert "Install check #1" in args[0]

        mock_logger.reset_mock()
        emitter.emit(ClientEvent(type=EventType.ERROR, message="Unexpected response"))
        mock_logger.error.assert_called_once()

        mock_logger.reset_mock()
        emitter.emit(ClientEvent(type=EventType.EXHAUSTED, message="Package is not installed"))
        mock_logger.error.assert_called_once()

        mock_logger.reset_mock()
        emitter.emit(ClientEvent(type=EventType.OPERATION_RESULT, message="failed", payload={"success": False}))
        mock_logger.warning.assert_called_once()

        mock_logger.reset_mock()
        emitter.emit(ClientEvent(type=EventType.OPERATION_RESULT, message="ok", payload={"success": True}))
        mock_logger.info.assert_called_once()


def test_composite_emitter_broadcasts() -> None:
    """Test that every emitter receives the event."""
    collector = EventCollector()
    other = MagicMock()
    event = ClientEvent(type=EventType.CONVERGED, message="done")

    CompositeEmitter([collector, other]).emit(event)

    assert collector.get_events() == [event]
    other.emit.assert_called_once_with(event)


def test_check_event_payload() -> None:
    """Test that check events carry only the fields given."""
    attempt = ClientEvent.for_check(
        EventType.CHECK_ATTEMPT, "Install check #2", check="Install", attempt=2, converged=False
    )
    done = ClientEvent.for_check(EventType.CONVERGED, "installed", check="Install", attempts=3)

    assert attempt.payload == {"check": "Install", "attempt": 2, "converged": False}
    assert done.payload == {"check": "Install", "attempts": 3}
    assert attempt.check == done.check == "Install"


def test_check_event_rejects_operation_types() -> None:
    """Test that operation events cannot be built as check events."""
    with pytest.raises(ValueError):
        ClientEvent.for_check(EventType.ERROR, "boom", check="Install")


def test_operation_event_has_no_check() -> None:
    """Test that a check key on an operation event is not read as a check label."""
    event = ClientEvent(type=EventType.ERROR, message="boom", payload={"check": "Install"})
    assert event.check is None


def test_collector_filters_by_check() -> None:
    """Test selecting the events of one convergence check."""
    collector = EventCollector()
    collector.emit(ClientEvent.for_check(EventType.CHECK_ATTEMPT, "a", check="Install", attempt=1, converged=False))
    collector.emit(ClientEvent(type=EventType.OPERATION_CALL, message="Calling package.delete"))
    collector.emit(ClientEvent.for_check(EventType.EXHAUSTED, "b", check="Delete", attempts=3))

    assert [e.message for e in collector.for_check("Install")] == ["a"]
    assert [e.message for e in collector.for_check("Delete")] == ["b"]


def test_loguru_emitter_binds_check() -> None:
    """Test that check events are logged with the check bound."""
    with patch("coreason_aem_client.events.logger") as mock_logger:
        LoguruEmitter().emit(ClientEvent.for_check(EventType.EXHAUSTED, "still there", check="Delete", attempts=3))

    mock_logger.bind.assert_called_once_with(check="Delete")
    mock_logger.bind.return_value.error.assert_called_once()
