from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from httpservice.types import Headers


@dataclass(frozen=True)
class Request:
    method: Literal["GET"] | Literal["POST"]
    url: str
    headers: Headers | None
    body: Any = None


@dataclass(frozen=True)
class Response:
    status: int
    headers: dict[str, str]
    body: Any


@dataclass
class RequestFailed(Exception):
    """
    Raised by an HttpImplementation when a request did not succeed.

    ``response`` is set when the server did answer, just with a status the
    transport considers an error.
    """

    inner: Exception
    response: Response | None = None

    def __str__(self) -> str:
        return f"{type(self.inner).__name__}: {self.inner}"


HttpImplementation = Callable[[Request], Awaitable[Response]]
