"""Typed exceptions raised by the mock transport.

Every precondition violation raises a subclass of MockBackendError.
Errors a test publishes through MockConnection.error() are not raised;
they travel on the connection's response channel as data.
"""

from typing import Any

from transport.enums import ReadyState


class MockBackendError(Exception):
    """Base exception for misuse of the mock transport."""


class IllegalStateError(MockBackendError, RuntimeError):
    """Operation is not valid in the current connection or backend state."""


class ConnectionResolvedError(IllegalStateError):
    """Raised when responding to a connection that is already DONE or CANCELLED.

    Attributes:
        ready_state: The terminal state the connection was in.

    """

    def __init__(self, *, ready_state: ReadyState) -> None:
        self.ready_state = ready_state
        super().__init__(f"Connection has already been resolved (state: {ready_state.name})")


class PendingConnectionsError(IllegalStateError):
    """Raised by verify_no_pending_requests when connections were left unresolved.

    Attributes:
        count: Number of connections still below the DONE state.

    """

    def __init__(self, *, count: int) -> None:
        self.count = count
        super().__init__(f"{count} pending connections to be resolved")


class IllegalArgumentError(MockBackendError, TypeError):
    """Raised when an operation receives a missing or wrong-type argument.

    Attributes:
        value: The offending value.

    """

    def __init__(self, message: str, *, value: Any = None) -> None:  # noqa: ANN401
        self.value = value
        super().__init__(message)
