from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.exc import SQLAlchemyError

from library_api import database

router = APIRouter(tags=["system"])


@router.get("/")
def read_root():
    return {
        "service": "Library API",
        "status": "Online",
        "message": "Bienvenido al sistema de gestión de autores y libros",
    }


@router.get("/health")
def health_check():
    """
    Healthcheck simple:
    - Devuelve healthy si puede abrir una conexión y ejecutar SELECT 1.
    """
    try:
        database.check_connection()
        return {"status": "healthy", "database": "connected"}
    except (SQLAlchemyError, RuntimeError) as e:
        return {"status": "unhealthy", "error": str(e)}


@router.get("/metrics", include_in_schema=False)
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
