"""
Observability middleware.

Tags every request with a correlation ID and logs one line per response.
"""

import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from taxibook.app.core.config import settings

logger = logging.getLogger("taxibook.requests")

CORRELATION_HEADER = "X-Correlation-ID"


def configure_logging(level: str = None) -> None:
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


class ObservabilityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Process-Time"] = str(elapsed_ms)

        context = {
            "correlation_id": correlation_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": elapsed_ms,
        }
        line = "%s %s -> %s (%sms)"
        args = (request.method, request.url.path, response.status_code, elapsed_ms)

        # Level follows the status class
        if response.status_code >= 500:
            logger.error(line, *args, extra=context)
        elif response.status_code >= 400:
            logger.warning(line, *args, extra=context)
        else:
            logger.info(line, *args, extra=context)

        return response
