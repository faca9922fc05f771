from dataclasses import dataclass, field

from httpservice.http.types import Request, Response


@dataclass
class FakeHttp:
    """Replays a fixed response, or raises a fixed error, and records requests."""

    response: Response | None = None
    error: BaseException | None = None
    requests: list[Request] = field(default_factory=list)

    async def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response
