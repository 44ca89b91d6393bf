"""Request-issuing facade over any ConnectionBackend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from transport.enums import RequestMethod
from transport.models import Request

if TYPE_CHECKING:
    from transport.emitter import EventEmitter
    from transport.protocol import ConnectionBackend


class HttpClient:
    """Build requests and return the response channel of the resulting connection.

    The client never inspects the backend type: with a MockBackend the
    returned channel is driven by the test, with a real backend by the
    network.
    """

    def __init__(self, backend: ConnectionBackend, default_headers: dict[str, str] | None = None) -> None:
        self._backend = backend
        self._default_headers = dict(default_headers or {})

    def request(
        self,
        url_or_request: str | Request,
        *,
        method: RequestMethod = RequestMethod.GET,
        headers: dict[str, str] | None = None,
        body: Any = None,  # noqa: ANN401
    ) -> EventEmitter:
        """Issue a request. A Request instance is passed to the backend unchanged."""
        if isinstance(url_or_request, Request):
            request = url_or_request
        else:
            request = Request(
                url=url_or_request,
                method=method,
                headers={**self._default_headers, **(headers or {})},
                body=body,
            )
        connection = self._backend.create_connection(request)
        return connection.response

    def get(self, url: str, *, headers: dict[str, str] | None = None) -> EventEmitter:
        return self.request(url, method=RequestMethod.GET, headers=headers)

    def head(self, url: str, *, headers: dict[str, str] | None = None) -> EventEmitter:
        return self.request(url, method=RequestMethod.HEAD, headers=headers)

    def options(self, url: str, *, headers: dict[str, str] | None = None) -> EventEmitter:
        return self.request(url, method=RequestMethod.OPTIONS, headers=headers)

    def delete(self, url: str, *, headers: dict[str, str] | None = None) -> EventEmitter:
        return self.request(url, method=RequestMethod.DELETE, headers=headers)

    def post(self, url: str, body: Any = None, *, headers: dict[str, str] | None = None) -> EventEmitter:  # noqa: ANN401
        return self.request(url, method=RequestMethod.POST, headers=headers, body=body)

    def put(self, url: str, body: Any = None, *, headers: dict[str, str] | None = None) -> EventEmitter:  # noqa: ANN401
        return self.request(url, method=RequestMethod.PUT, headers=headers, body=body)

    def patch(self, url: str, body: Any = None, *, headers: dict[str, str] | None = None) -> EventEmitter:  # noqa: ANN401
        return self.request(url, method=RequestMethod.PATCH, headers=headers, body=body)
