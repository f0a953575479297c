"""
Jerarquía de errores del servicio.

Los servicios lanzan estos errores; los handlers globales (ver
register_error_handlers) los convierten en respuestas JSON:

    {"detail": "<mensaje>", "code": "<CODIGO>"}

Taxonomía de códigos HTTP:
- 400 -> validación del body o fecha mal formada
- 404 -> el registro no existe
- 409 -> la BD rechaza la escritura por una restricción (FK, RESTRICT...)
- 500 -> cualquier otro fallo de la BD
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Configuración de arranque ausente o inválida."""


class LibraryError(Exception):
    """Error base del dominio autores/libros."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class AuthorNotFoundError(LibraryError):
    def __init__(self, author_id):
        super().__init__(
            f"author {author_id} could not be found", "AUTHOR_NOT_FOUND", status.HTTP_404_NOT_FOUND
        )
        self.author_id = author_id


class BookNotFoundError(LibraryError):
    def __init__(self, book_id):
        super().__init__(
            f"book {book_id} could not be found", "BOOK_NOT_FOUND", status.HTTP_404_NOT_FOUND
        )
        self.book_id = book_id


class MalformedDateError(LibraryError):
    def __init__(self, value: str):
        super().__init__(
            f"datePublished '{value}' is not a valid date",
            "MALFORMED_DATE",
            status.HTTP_400_BAD_REQUEST,
        )
        self.value = value


class StoreConflictError(LibraryError):
    """La BD rechazó la escritura por una restricción de integridad."""

    def __init__(self, message: str):
        super().__init__(message, "STORE_CONFLICT", status.HTTP_409_CONFLICT)


class StoreError(LibraryError):
    def __init__(self, message: str = "Database error"):
        super().__init__(message, "STORE_ERROR", status.HTTP_500_INTERNAL_SERVER_ERROR)


# ---------------------------------------------------------------------
# Handlers globales
# ---------------------------------------------------------------------

def register_error_handlers(app: FastAPI) -> None:
    """Registra los handlers de error en la app."""

    @app.exception_handler(LibraryError)
    async def library_error_handler(request: Request, exc: LibraryError):
        log = logger.error if exc.http_status >= 500 else logger.warning
        log("path=%s code=%s error=%s", request.url.path, exc.code, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("path=%s validation_errors=%s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request data",
                "errors": [
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        # No devolvemos detalles internos de la BD al cliente
        logger.error("path=%s store error", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=StoreError().to_response(),
        )
