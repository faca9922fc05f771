from collections.abc import Mapping
from typing import Any, TypedDict

Timeout = float | int

Headers = Mapping[str, str]
Body = Any


class RequestConfig(TypedDict, total=False):
    headers: Headers | None
    body: Body


JSON_CONTENT_TYPES = frozenset({"application/json", "text/json"})
