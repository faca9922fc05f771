from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Literal

from .http.httpx import HTTPX
from .http.types import HttpImplementation, Request, RequestFailed, Response
from .models import Failure, Result, Success
from .types import Headers, RequestConfig

log = logging.getLogger(__name__)


def attached_response(error: Exception) -> Response | None:
    """
    The response a transport error carries, if the server answered at all.
    """
    if isinstance(error, RequestFailed):
        return error.response
    return None


@dataclass(frozen=True)
class HttpService:
    """
    Issues single HTTP requests and folds the outcome into a Result.

    Example::

        result = await service.get("https://my-api.com/users")
        if isinstance(result, Failure):
            log.error("Fetching users failed: %r", result.error)
            return
        # status_code may still be 404 or 500
        users = result.body
    """

    http: HttpImplementation = field(default_factory=HTTPX)

    async def get(self, url: str, config: RequestConfig | None = None) -> Result:
        config = config or {}
        return await self._call("GET", url, headers=config.get("headers"))

    async def post(self, url: str, config: RequestConfig | None = None) -> Result:
        config = config or {}
        return await self._call(
            "POST", url, headers=config.get("headers"), body=config.get("body")
        )

    async def _call(
        self,
        method: Literal["GET"] | Literal["POST"],
        url: str,
        headers: Headers | None,
        body: Any = None,
    ) -> Result:
        request = Request(method=method, url=url, headers=headers, body=body)
        log.debug("%s %s", method, url)
        try:
            response = await self.http(request)
        except Exception as exc:
            response = attached_response(exc)
            if response is None:
                log.warning(
                    "%s %s got no response: %s", method, url, type(exc).__name__
                )
                return Failure(error=exc)
        log.debug("%s %s -> %d", method, url, response.status)
        return Success.from_response(response)


_default = HttpService()


async def get(url: str, config: RequestConfig | None = None) -> Result:
    return await _default.get(url, config)


async def post(url: str, config: RequestConfig | None = None) -> Result:
    return await _default.post(url, config)
