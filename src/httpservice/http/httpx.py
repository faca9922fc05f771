from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from httpservice.types import JSON_CONTENT_TYPES, Timeout

from .types import Request, RequestFailed, Response


def is_json(content_type: str | None) -> bool:
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime in JSON_CONTENT_TYPES or mime.endswith("+json")


def decode_body(response: httpx.Response) -> Any:
    if is_json(response.headers.get("content-type")):
        try:
            return response.json()
        except ValueError:
            # bad JSON is handed back as text
            pass
    return response.text


def to_response(response: httpx.Response) -> Response:
    return Response(
        status=response.status_code,
        headers=dict(response.headers),
        body=decode_body(response),
    )


def encode_body(body: Any) -> dict[str, Any]:
    if body is None:
        return {}
    if isinstance(body, (str, bytes)):
        return {"content": body}
    return {"json": body}


@dataclass(frozen=True)
class HTTPX:
    """
    HttpImplementation backed by httpx.

    Without a ``client`` every request opens and closes its own
    ``httpx.AsyncClient``; ``timeout`` only applies to those clients.
    """

    client: httpx.AsyncClient | None = None
    timeout: Timeout = 5.0

    async def __call__(self, request: Request) -> Response:
        if self.client is not None:
            return await self._send(self.client, request)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: Request) -> Response:
        try:
            response = await client.request(
                request.method,
                request.url,
                headers=dict(request.headers) if request.headers else None,
                **encode_body(request.body),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RequestFailed(exc, to_response(exc.response)) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RequestFailed(exc) from exc
        return to_response(response)
