import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, load_only

from library_api import models, schemas
from library_api.errors import AuthorNotFoundError
from library_api.services import books as book_service
from library_api.services import commit_or_raise

logger = logging.getLogger(__name__)

AUTHOR_READ_VIEW = load_only(
    models.Author.id,
    models.Author.first_name,
    models.Author.last_name,
)


def _get_row(db: Session, author_id: Optional[int]) -> Optional[models.Author]:
    if author_id is None:
        return None
    return db.get(models.Author, author_id)


def list_authors(db: Session) -> List[schemas.Author]:
    """Lista todos los autores (sin filtros ni paginación)."""
    stmt = select(models.Author).options(AUTHOR_READ_VIEW).order_by(models.Author.id)
    return [schemas.Author.model_validate(a) for a in db.execute(stmt).scalars().all()]


def get_author(db: Session, author_id: Optional[int]) -> Optional[schemas.Author]:
    """Devuelve el autor o None si no existe."""
    if author_id is None:
        return None
    stmt = select(models.Author).options(AUTHOR_READ_VIEW).where(models.Author.id == author_id)
    author = db.execute(stmt).scalars().first()
    return schemas.Author.model_validate(author) if author else None


def list_author_books(db: Session, author_id: Optional[int]) -> List[schemas.Book]:
    """Libros de un autor; AuthorNotFoundError si el autor no existe."""
    if _get_row(db, author_id) is None:
        raise AuthorNotFoundError(author_id)
    return book_service.list_books_by_author(db, author_id)


def create_author(db: Session, fields: schemas.AuthorCreate) -> schemas.Author:
    db_author = models.Author(first_name=fields.first_name, last_name=fields.last_name)
    db.add(db_author)
    commit_or_raise(db, "author could not be created")
    db.refresh(db_author)
    logger.info("Autor creado id=%s", db_author.id)
    return schemas.Author.model_validate(db_author)


def update_author(db: Session, fields: schemas.AuthorCreate, author_id: Optional[int]) -> schemas.Author:
    """Reemplaza firstName/lastName del autor."""
    author = _get_row(db, author_id)
    if not author:
        raise AuthorNotFoundError(author_id)

    author.first_name = fields.first_name
    author.last_name = fields.last_name
    commit_or_raise(db, f"author {author_id} could not be updated")
    db.refresh(author)
    logger.info("Autor actualizado id=%s", author_id)
    return schemas.Author.model_validate(author)


def delete_author(db: Session, author_id: Optional[int]) -> None:
    """
    Borra el autor.

    Si todavía tiene libros la BD lo impide (ON DELETE RESTRICT) y se lanza
    StoreConflictError.
    """
    author = _get_row(db, author_id)
    if not author:
        raise AuthorNotFoundError(author_id)

    db.delete(author)
    commit_or_raise(db, f"author {author_id} still has books and cannot be deleted")
    logger.info("Autor borrado id=%s", author_id)
