"""
library_api/main.py

API de Autores y Libros (FastAPI) con relación Uno-a-Muchos Autor -> Libros.

Cada ruta sigue el mismo flujo:
  validar body (pydantic) -> llamar al servicio -> dar forma a la respuesta

Endpoints clave (bajo API_PREFIX, por defecto /api):
- /authors, /authors/{id}, /authors/{id}/books
- /books, /books/{id}
- GET /health   -> healthcheck con verificación DB
- GET /metrics  -> métricas Prometheus
- GET /docs     -> Swagger UI (OpenAPI en /docs.json)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from library_api import __version__, database
from library_api.config import get_settings
from library_api.errors import register_error_handlers
from library_api.observability import register_request_middleware, setup_logging
from library_api.routers import authors, books, system

logger = logging.getLogger("library_api")

settings = get_settings()


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging(settings.log_level)
    database.init_db(settings.database_url)
    logger.info("Library API iniciada")
    try:
        yield
    finally:
        database.dispose_db()
        logger.info("Library API detenida")


app = FastAPI(
    title="Library API",
    description="Servicio encargado de la gestión de autores y sus libros",
    version=__version__,
    docs_url="/docs",
    openapi_url="/docs.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_middleware(app)
register_error_handlers(app)

app.include_router(system.router)
app.include_router(authors.router, prefix=settings.api_prefix)
app.include_router(books.router, prefix=settings.api_prefix)
