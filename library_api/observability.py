"""
Observabilidad básica: logging, request-id y métricas Prometheus.
"""

import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request
from prometheus_client import Counter, Histogram

logger = logging.getLogger("library_api.http")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"]
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "path"]
)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def _route_path(request: Request) -> str:
    """
    Plantilla del path completo (/api/books/{book_id}), no el path con el id.

    Se reconstruye desde el path real sustituyendo los parámetros ya
    resueltos por el router, así incluye el prefijo de include_router.
    """
    segments = request.url.path.split("/")
    for name, value in request.path_params.items():
        value = str(value)
        for i in range(len(segments) - 1, -1, -1):
            if segments[i] == value:
                segments[i] = "{%s}" % name
                break
    return "/".join(segments)


def register_request_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-Id", str(uuid4()))
        start = time.time()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception(
                "request_id=%s method=%s path=%s error=%s",
                request_id, request.method, request.url.path, str(exc)
            )
            raise

        elapsed = time.time() - start
        logger.info(
            "request_id=%s method=%s path=%s status=%s duration_ms=%s",
            request_id, request.method, request.url.path, response.status_code, int(elapsed * 1000)
        )
        path = _route_path(request)
        REQUEST_COUNT.labels(request.method, path, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(request.method, path).observe(elapsed)

        response.headers["X-Request-Id"] = request_id
        return response
