"""
Servicio de libros.

Todas las lecturas (y lo que devuelven create/update) usan la misma vista:

    {id, title, datePublished, isFiction, author: {id, firstName, lastName}}
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, load_only

from library_api import models, schemas
from library_api.errors import BookNotFoundError, MalformedDateError
from library_api.services import commit_or_raise

logger = logging.getLogger(__name__)

BOOK_READ_VIEW = (
    load_only(
        models.Book.id,
        models.Book.title,
        models.Book.date_published,
        models.Book.is_fiction,
        models.Book.author_id,
    ),
    joinedload(models.Book.author).load_only(
        models.Author.id,
        models.Author.first_name,
        models.Author.last_name,
    ),
)


def parse_date_published(value: str) -> date:
    """
    Convierte datePublished (string) a fecha.

    Acepta fecha ISO ("2023-01-02") o fecha-hora ISO ("2023-01-02T10:00:00Z");
    de la fecha-hora solo se guarda la parte de fecha.
    """
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        raise MalformedDateError(value) from None


def _select_books():
    return select(models.Book).options(*BOOK_READ_VIEW)


def _read_book(db: Session, book_id: int) -> Optional[models.Book]:
    return db.execute(_select_books().where(models.Book.id == book_id)).scalars().first()


def list_books(db: Session) -> List[schemas.Book]:
    """Lista todos los libros con su autor embebido."""
    rows = db.execute(_select_books().order_by(models.Book.id)).scalars().all()
    return [schemas.Book.model_validate(b) for b in rows]


def list_books_by_author(db: Session, author_id: int) -> List[schemas.Book]:
    stmt = (
        _select_books()
        .where(models.Book.author_id == author_id)
        .order_by(models.Book.id)
    )
    return [schemas.Book.model_validate(b) for b in db.execute(stmt).scalars().all()]


def get_book(db: Session, book_id: Optional[int]) -> Optional[schemas.Book]:
    """Devuelve el libro o None si no existe (un id no numérico llega como None)."""
    if book_id is None:
        return None
    book = _read_book(db, book_id)
    return schemas.Book.model_validate(book) if book else None


def create_book(db: Session, fields: schemas.BookWrite) -> schemas.Book:
    """
    Crea un libro.

    La FK authorId la valida la BD: si el autor no existe se lanza
    StoreConflictError (409).
    """
    db_book = models.Book(
        title=fields.title,
        author_id=fields.author_id,
        date_published=parse_date_published(fields.date_published),
        is_fiction=fields.is_fiction,
    )
    db.add(db_book)
    commit_or_raise(db, f"author {fields.author_id} does not exist")
    logger.info("Libro creado id=%s author_id=%s", db_book.id, fields.author_id)
    return schemas.Book.model_validate(_read_book(db, db_book.id))


def update_book(db: Session, fields: schemas.BookWrite, book_id: Optional[int]) -> schemas.Book:
    """Reemplaza todos los campos del libro."""
    date_published = parse_date_published(fields.date_published)

    book = db.get(models.Book, book_id) if book_id is not None else None
    if not book:
        raise BookNotFoundError(book_id)

    book.title = fields.title
    book.author_id = fields.author_id
    book.date_published = date_published
    book.is_fiction = fields.is_fiction
    commit_or_raise(db, f"author {fields.author_id} does not exist")
    logger.info("Libro actualizado id=%s", book_id)
    return schemas.Book.model_validate(_read_book(db, book_id))


def delete_book(db: Session, book_id: Optional[int]) -> None:
    book = db.get(models.Book, book_id) if book_id is not None else None
    if not book:
        raise BookNotFoundError(book_id)

    db.delete(book)
    commit_or_raise(db, f"book {book_id} could not be deleted")
    logger.info("Libro borrado id=%s", book_id)
