"""Tests for EventEmitter class."""

import threading

import pytest

from jobpool.events import EventEmitter, NullEmitter


@pytest.fixture
def test_emitter(mock_logger):
    return EventEmitter(logger=mock_logger)


class TestEventEmitterSubscription:
    """Test event subscription and unsubscription."""

    def test_on_registers_handler(self, test_emitter):
        """Test that on() registers a handler for an event type."""

        def handler(event):
            pass

        test_emitter.on("test.event", handler)

        assert handler in test_emitter._handlers["test.event"]

    def test_multiple_handlers_can_subscribe(self, test_emitter):
        """Test that multiple handlers can subscribe to same event."""

        def handler1(event):
            pass

        def handler2(event):
            pass

        test_emitter.on("test.event", handler1)
        test_emitter.on("test.event", handler2)

        assert test_emitter._handlers["test.event"] == [handler1, handler2]

    def test_off_removes_handler(self, test_emitter):
        """Test that off() removes a handler."""

        def handler(event):
            pass

        test_emitter.on("test.event", handler)
        test_emitter.off("test.event", handler)

        assert handler not in test_emitter._handlers.get("test.event", [])

    def test_off_handles_non_existent_handler_gracefully(self, test_emitter):
        """Test that off() handles removing non-existent handler without error."""

        def handler(event):
            pass

        test_emitter.off("test.event", handler)

        warning_msg = f"Handler {handler} not found for event test.event"
        test_emitter._logger.warning.assert_called_once_with(warning_msg)


class TestEventEmitterEmit:
    """Test handler execution."""

    def test_handler_receives_event(self, test_emitter):
        received = []
        test_emitter.on("test.event", received.append)

        test_data = {"key": "value"}
        test_emitter.emit("test.event", test_data)

        assert received == [test_data]

    def test_only_matching_handlers_run(self, test_emitter):
        received = []
        test_emitter.on("a", received.append)

        test_emitter.emit("b", "ignored")

        assert received == []

    def test_handlers_run_in_subscription_order(self, test_emitter):
        calls = []
        test_emitter.on("test.event", lambda e: calls.append("first"))
        test_emitter.on("test.event", lambda e: calls.append("second"))

        test_emitter.emit("test.event", None)

        assert calls == ["first", "second"]

    def test_handler_exception_does_not_break_emission(self, test_emitter):
        """Exceptions in handlers are logged and other handlers still run."""
        calls = []

        def bad_handler(event):
            calls.append("bad")
            raise ValueError("Handler error")

        test_emitter.on("test.event", bad_handler)
        test_emitter.on("test.event", lambda e: calls.append("good"))

        test_emitter.emit("test.event", {})

        assert calls == ["bad", "good"]
        test_emitter._logger.error.assert_called_once()
        assert "ValueError: Handler error" in test_emitter._logger.error.call_args.args[0]

    def test_unsubscribe_during_emit_applies_to_next_emit(self, test_emitter):
        calls = []

        def once(event):
            calls.append(event)
            test_emitter.off("test.event", once)

        test_emitter.on("test.event", once)
        test_emitter.emit("test.event", 1)
        test_emitter.emit("test.event", 2)

        assert calls == [1]

    def test_emit_from_many_threads(self, test_emitter, recorder):
        test_emitter.on("test.event", recorder.add)

        threads = [
            threading.Thread(target=test_emitter.emit, args=("test.event", i))
            for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(5.0)

        assert sorted(recorder.items) == list(range(20))


class TestNullEmitter:
    def test_is_silent(self):
        emitter = NullEmitter()
        handler_calls = []

        emitter.on("test.event", handler_calls.append)
        emitter.emit("test.event", "data")
        emitter.off("test.event", handler_calls.append)

        assert handler_calls == []
