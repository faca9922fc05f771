from __future__ import annotations

import asyncio
import logging
import sys

from .models import Failure
from .service import get

log = logging.getLogger("httpservice.demo")

DEFAULT_URL = "http://localhost:3000/"


async def run(url: str) -> int:
    result = await get(url)
    if isinstance(result, Failure):
        log.error("%s: %s", type(result.error).__name__, result.error)
        return 1
    log.info("%s", result.body)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    return asyncio.run(run(args[0] if args else DEFAULT_URL))


if __name__ == "__main__":
    sys.exit(main())
