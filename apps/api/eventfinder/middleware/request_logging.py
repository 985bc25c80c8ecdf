import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        started = time.perf_counter()

        # Bind to structlog contextvars so every log line includes it
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response: Response = await call_next(request)
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            fields = {
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            }
            if response.status_code >= 500:
                logger.error("request_completed", **fields)
            elif response.status_code >= 400:
                logger.warning("request_completed", **fields)
            else:
                logger.info("request_completed", **fields)
        except Exception:
            logger.exception("request_failed", method=request.method, path=str(request.url))
            raise
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers["X-Request-ID"] = request_id
        return response
