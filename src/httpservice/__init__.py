import logging

from .http.types import HttpImplementation, Request, RequestFailed, Response
from .models import Failure, Result, Success
from .service import HttpService, get, post
from .types import RequestConfig

logging.getLogger("httpservice").addHandler(logging.NullHandler())

__all__ = [
    "Failure",
    "HttpImplementation",
    "HttpService",
    "Request",
    "RequestConfig",
    "RequestFailed",
    "Response",
    "Result",
    "Success",
    "get",
    "post",
]
