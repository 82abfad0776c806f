import logging
import time

from fastapi import Request

from balancesheet.core.config import LOG_LEVEL

logger = logging.getLogger("balancesheet.access")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %s in %.0fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response
