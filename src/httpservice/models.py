from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from .http.types import Response
from .types import Headers


@dataclass(frozen=True)
class Success:
    """
    An HTTP round trip completed. The status may still be 4xx or 5xx, it is
    up to the caller to decide whether that is an application error.
    """

    ok: ClassVar[bool] = True

    status_code: int
    headers: Headers
    body: Any

    @classmethod
    def from_response(cls, response: Response) -> Success:
        return cls(
            status_code=response.status,
            headers=response.headers,
            body=response.body,
        )


@dataclass(frozen=True)
class Failure:
    """
    No HTTP response was received. ``error`` is whatever was raised, as is.
    """

    ok: ClassVar[bool] = False

    error: Exception


Result = Success | Failure
