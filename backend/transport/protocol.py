"""Structural interfaces a transport backend must satisfy.

Calling code depends only on these protocols, so the mock backend and any
real backend are interchangeable without sharing a base class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from transport.emitter import EventEmitter
    from transport.enums import ReadyState
    from transport.models import Request


@runtime_checkable
class Connection(Protocol):
    """One in-flight request and the channel its outcome is delivered on."""

    ready_state: ReadyState

    @property
    def request(self) -> Request: ...

    @property
    def response(self) -> EventEmitter: ...

    def cancel(self) -> None: ...


@runtime_checkable
class ConnectionBackend(Protocol):
    """Factory for connections."""

    def create_connection(self, request: Request) -> Connection: ...
