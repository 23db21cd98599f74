# registrar/core/logging.py
import logging
import logging.config
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from registrar.core.config import settings

def setup_logging(level: str | None = None) -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "default"},
        },
        "root": {"handlers": ["console"], "level": level or settings.LOG_LEVEL},
        "loggers": {
            "uvicorn.access": {"level": "WARNING"},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
    })

class RequestLogMiddleware(BaseHTTPMiddleware):
    """One line per API call: method, path, status and duration."""

    logger = logging.getLogger("registrar.http")

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        path = request.url.path
        if path.startswith("/api"):
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.logger.info("%s %s %s in %.0fms", request.method, path, response.status_code, elapsed_ms)
        return response
