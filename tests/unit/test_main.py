import logging
from collections.abc import Awaitable, Callable

import pytest

from httpservice import __main__ as demo
from httpservice.http.types import RequestFailed
from httpservice.models import Failure, Result, Success


def fake_get(result: Result, seen: list[str]) -> Callable[[str], Awaitable[Result]]:
    async def get(url: str) -> Result:
        seen.append(url)
        return result

    return get


def test_logs_body(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    seen: list[str] = []
    monkeypatch.setattr(demo, "get", fake_get(Success(200, {}, "hello"), seen))
    with caplog.at_level(logging.INFO, logger="httpservice.demo"):
        assert demo.main([]) == 0
    assert seen == [demo.DEFAULT_URL]
    assert "hello" in caplog.text


def test_logs_error(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    seen: list[str] = []
    error = RequestFailed(ConnectionRefusedError("refused"))
    monkeypatch.setattr(demo, "get", fake_get(Failure(error), seen))
    with caplog.at_level(logging.INFO, logger="httpservice.demo"):
        assert demo.main(["http://localhost:8080/health"]) == 1
    assert seen == ["http://localhost:8080/health"]
    assert "RequestFailed: ConnectionRefusedError: refused" in caplog.text
