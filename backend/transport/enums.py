"""Enumerations shared by the transport layer."""

from enum import IntEnum, StrEnum


class ReadyState(IntEnum):
    """Lifecycle stage of a connection.

    Values follow XMLHttpRequest.readyState, with CANCELLED added as an
    extra terminal state for aborted connections.
    """

    UNSENT = 0
    OPEN = 1
    HEADERS_RECEIVED = 2
    LOADING = 3
    DONE = 4
    CANCELLED = 5


TERMINAL_STATES = frozenset({ReadyState.DONE, ReadyState.CANCELLED})


class RequestMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
