"""In-memory connection backend for testing code that issues requests.

MockBackend stands in for a real transport. Every create_connection() call
produces a MockConnection that is announced on MockBackend.connections; a
test subscribed there resolves it with respond(), error() or cancel(), and
the caller observing MockConnection.response sees the outcome exactly as it
would from a real backend.

Example:
    backend = MockBackend()
    backend.connections.subscribe(lambda c: c.respond(Response(body="awesome")))
    client = HttpClient(backend)
    client.get("data.json").subscribe(lambda res: print(res.text()))  # awesome

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from transport.emitter import EventEmitter
from transport.enums import TERMINAL_STATES, ReadyState
from transport.exceptions import ConnectionResolvedError, IllegalArgumentError, PendingConnectionsError
from transport.models import Request
from transport.settings import MockBackendSettings

if TYPE_CHECKING:
    from transport.models import Response

logger = structlog.get_logger()


class MockConnection:
    """A single mocked request/response exchange.

    Usually obtained by subscribing to MockBackend.connections rather than
    constructed directly.

    Lifecycle:
    - OPEN on construction
    - respond() or error() moves it to DONE and closes the response channel
    - cancel() moves it to CANCELLED unless it is already DONE
    - error() may move any state to DONE, matching XHR semantics where late
      errors still arrive after an abort
    """

    def __init__(self, request: Request) -> None:
        if request is None:
            raise IllegalArgumentError("MockConnection requires a request, got None", value=request)
        self.ready_state = ReadyState.OPEN
        self._request = request
        self._response = EventEmitter()

    @property
    def request(self) -> Request:
        return self._request

    @property
    def response(self) -> EventEmitter:
        """Channel carrying the single Response (or error) for this connection."""
        return self._response

    def cancel(self) -> None:
        if self.ready_state != ReadyState.DONE:
            self.ready_state = ReadyState.CANCELLED
            logger.debug("connection cancelled", url=self._request.url)

    def respond(self, response: Response) -> None:
        """Deliver a mock response to whoever observes this connection.

        Raises ConnectionResolvedError if the connection is already DONE or
        CANCELLED.
        """
        if self.ready_state in TERMINAL_STATES:
            raise ConnectionResolvedError(ready_state=self.ready_state)
        self.ready_state = ReadyState.DONE
        logger.debug("connection resolved", url=self._request.url)
        self._response.emit(response)
        self._response.complete()

    def partial_download(self, response: Response) -> None:
        """Progressive download notification. Not implemented; state is left untouched."""

    def error(self, err: Any = None) -> None:  # noqa: ANN401
        """Signal err on the response channel and close it. Allowed from any state."""
        self.ready_state = ReadyState.DONE
        logger.debug("connection errored", url=self._request.url, error=repr(err))
        self._response.error(err)


class MockBackend:
    """Connection backend that records every connection instead of performing I/O.

    Each instance owns its own history and channels, so one backend per
    test keeps tests isolated. connections, connection_history and the
    verification helpers exist only on the mock, not on real backends.
    """

    def __init__(self, settings: MockBackendSettings | None = None) -> None:
        self._settings = settings or MockBackendSettings()
        self._history: list[MockConnection] = []
        self.connections = EventEmitter()
        self.connections.subscribe(self._history.append)
        # connections below DONE, published only while verifying
        self.pending_connections = EventEmitter()

    @property
    def settings(self) -> MockBackendSettings:
        return self._settings

    @property
    def connection_history(self) -> list[MockConnection]:
        """Every connection created by this backend, oldest first."""
        return self._history.copy()

    def create_connection(self, request: Request) -> MockConnection:
        """Create a connection for request and announce it on connections.

        Subscribers are notified before this returns, and receive the same
        instance that is returned.
        """
        if request is None or not isinstance(request, Request):
            raise IllegalArgumentError(
                f"create_connection requires an instance of Request, got {request!r}",
                value=request,
            )
        connection = MockConnection(request)
        logger.debug("connection created", method=request.method, url=request.url)
        self.connections.emit(connection)
        return connection

    def verify_no_pending_requests(self) -> None:
        """Raise PendingConnectionsError if any connection has not been resolved.

        Cancelled connections do not count as pending. Pair with
        resolve_all_connections() when leftover connections are expected.
        """
        pending = 0

        def _count(_connection: MockConnection) -> None:
            nonlocal pending
            pending += 1

        subscription = self.pending_connections.subscribe(_count)
        try:
            if self._settings.track_pending:
                for connection in self._history:
                    if connection.ready_state < ReadyState.DONE:
                        self.pending_connections.emit(connection)
        finally:
            subscription.unsubscribe()

        if pending > 0:
            logger.warning("pending connections found", count=pending)
            raise PendingConnectionsError(count=pending)

    def resolve_all_connections(self) -> None:
        """Mark every connection DONE without publishing on its response channel."""
        for connection in self._history:
            connection.ready_state = ReadyState.DONE
        logger.debug("resolved all connections", count=len(self._history))
