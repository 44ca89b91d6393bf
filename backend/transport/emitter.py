"""Synchronous multicast notification channel.

An EventEmitter delivers every signal to the observers registered at the
moment of the call, in registration order, on the caller's stack. There is
no buffering: observers that subscribe after a signal never see it.

A channel carries any number of values followed by at most one terminal
signal (error or complete). After the terminal signal the channel is closed
and further signals are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, eq=False)
class _Observer:
    on_next: Callable[[Any], None]
    on_error: Callable[[Any], None] | None = None
    on_complete: Callable[[], None] | None = None


class Subscription:
    """Handle returned by EventEmitter.subscribe."""

    def __init__(self, emitter: EventEmitter, observer: _Observer) -> None:
        self._emitter = emitter
        self._observer = observer
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Stop receiving signals. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._emitter._remove(self._observer)  # noqa: SLF001


class EventEmitter:
    def __init__(self) -> None:
        self._observers: list[_Observer] = []
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def subscribe(
        self,
        on_next: Callable[[Any], None],
        on_error: Callable[[Any], None] | None = None,
        on_complete: Callable[[], None] | None = None,
    ) -> Subscription:
        observer = _Observer(on_next=on_next, on_error=on_error, on_complete=on_complete)
        # a closed channel never signals again, so there is nothing to register for
        if not self._closed:
            self._observers.append(observer)
        return Subscription(self, observer)

    def emit(self, value: Any) -> None:  # noqa: ANN401
        if self._closed:
            return
        # snapshot so observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer.on_next(value)

    def error(self, err: Any = None) -> None:  # noqa: ANN401
        """Signal an error to every observer that handles errors, then close."""
        if self._closed:
            return
        self._closed = True
        observers, self._observers = self._observers, []
        for observer in observers:
            if observer.on_error is not None:
                observer.on_error(err)

    def complete(self) -> None:
        """Signal normal completion to every observer, then close."""
        if self._closed:
            return
        self._closed = True
        observers, self._observers = self._observers, []
        for observer in observers:
            if observer.on_complete is not None:
                observer.on_complete()

    def _remove(self, observer: _Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
