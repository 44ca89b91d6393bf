import pytest

from transport.emitter import EventEmitter


class TestEventEmitterDelivery:
    def test_emit_delivers_to_all_observers_in_registration_order(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(lambda v: received.append(("first", v)))
        emitter.subscribe(lambda v: received.append(("second", v)))

        emitter.emit(1)

        assert received == [("first", 1), ("second", 1)]

    def test_delivery_is_synchronous(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append)

        emitter.emit("now")

        assert received == ["now"]

    def test_late_subscriber_misses_past_values(self):
        emitter = EventEmitter()
        emitter.emit("early")
        received = []
        emitter.subscribe(received.append)

        emitter.emit("late")

        assert received == ["late"]

    def test_observer_exception_propagates_to_emitter_caller(self):
        emitter = EventEmitter()

        def _boom(_value):
            raise RuntimeError("observer failed")

        emitter.subscribe(_boom)

        with pytest.raises(RuntimeError, match="observer failed"):
            emitter.emit(1)


class TestEventEmitterTermination:
    def test_complete_notifies_and_closes(self):
        emitter = EventEmitter()
        completed = []
        emitter.subscribe(lambda _v: None, on_complete=lambda: completed.append(True))

        emitter.complete()

        assert completed == [True]
        assert emitter.is_closed
        assert emitter.observer_count == 0

    def test_error_notifies_error_handlers_and_closes(self):
        emitter = EventEmitter()
        errors = []
        emitter.subscribe(lambda _v: None, on_error=errors.append)

        emitter.error("boom")

        assert errors == ["boom"]
        assert emitter.is_closed

    def test_error_skips_observers_without_error_handler(self):
        emitter = EventEmitter()
        emitter.subscribe(lambda _v: None)

        emitter.error(ValueError("ignored"))

        assert emitter.is_closed

    def test_signals_after_close_are_ignored(self):
        emitter = EventEmitter()
        received = []
        errors = []
        completions = []
        emitter.subscribe(received.append, on_error=errors.append, on_complete=lambda: completions.append(True))
        emitter.complete()

        emitter.emit("after")
        emitter.error("after")
        emitter.complete()

        assert received == []
        assert errors == []
        assert completions == [True]

    def test_subscribe_to_closed_channel_receives_nothing(self):
        emitter = EventEmitter()
        emitter.complete()
        completions = []

        emitter.subscribe(lambda _v: None, on_complete=lambda: completions.append(True))

        assert completions == []
        assert emitter.observer_count == 0


class TestSubscription:
    def test_unsubscribe_stops_delivery(self):
        emitter = EventEmitter()
        received = []
        subscription = emitter.subscribe(received.append)

        subscription.unsubscribe()
        emitter.emit(1)

        assert received == []
        assert subscription.active is False

    def test_unsubscribe_is_idempotent(self):
        emitter = EventEmitter()
        subscription = emitter.subscribe(lambda _v: None)

        subscription.unsubscribe()
        subscription.unsubscribe()

        assert emitter.observer_count == 0

    def test_unsubscribe_removes_only_its_own_observer(self):
        emitter = EventEmitter()
        received = []
        first = emitter.subscribe(received.append)
        emitter.subscribe(received.append)

        first.unsubscribe()
        emitter.emit("x")

        assert received == ["x"]

    def test_observer_may_unsubscribe_during_delivery(self):
        emitter = EventEmitter()
        received = []
        subscription = None

        def _once(value):
            received.append(value)
            subscription.unsubscribe()

        subscription = emitter.subscribe(_once)
        emitter.subscribe(lambda v: received.append(("other", v)))

        emitter.emit(1)
        emitter.emit(2)

        assert received == [1, ("other", 1), ("other", 2)]
