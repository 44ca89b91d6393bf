"""Request and response value objects passed through the transport.

The mock backend treats both as opaque: it stores the Request it was given
and hands the Response a test supplies to the caller unchanged.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from transport.enums import RequestMethod


class Request(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    method: RequestMethod = RequestMethod.GET
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None


class Response(BaseModel):
    model_config = ConfigDict(frozen=True)

    body: Any = None
    status: int = Field(default=200, ge=100, le=599)
    status_text: str = "OK"
    headers: dict[str, str] = Field(default_factory=dict)
    url: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300  # noqa: PLR2004

    def text(self) -> str:
        """Return the body as a string.

        Bytes are decoded as UTF-8, a missing body is an empty string and
        any other value is JSON-encoded.
        """
        if self.body is None:
            return ""
        if isinstance(self.body, str):
            return self.body
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return json.dumps(self.body)

    def json(self) -> Any:  # noqa: ANN401
        """Parse a str or bytes body as JSON; return structured bodies unchanged."""
        if isinstance(self.body, str | bytes):
            return json.loads(self.body)
        return self.body
