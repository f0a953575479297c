"""
Servicios de entidad (autores y libros).

Cada servicio es una capa fina sobre la sesión de SQLAlchemy: define la vista
de lectura que se devuelve y da forma a la entrada antes de escribir. Cada
operación de escritura es un único commit.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from library_api.errors import StoreConflictError


def commit_or_raise(db: Session, conflict_message: str) -> None:
    """
    Hace commit; si la BD rechaza la escritura por integridad lanza
    StoreConflictError. Cualquier otro error de BD se propaga tal cual.
    En ambos casos la sesión queda con rollback.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise StoreConflictError(conflict_message) from e
    except SQLAlchemyError:
        db.rollback()
        raise
