from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from library_api import schemas
from library_api.database import get_db
from library_api.routers import parse_id
from library_api.services import books as book_service

router = APIRouter(prefix="/books", tags=["books"])


# -------------------------------
# GET /books (listar libros)
# -------------------------------
@router.get("", summary="List books", response_model=List[schemas.Book])
def list_books(db: Session = Depends(get_db)):
    """
    Lista todos los libros.

    Cada libro incluye su autor (id, firstName, lastName).
    """
    return book_service.list_books(db)


# -------------------------------
# GET /books/{book_id} (detalle)
# -------------------------------
@router.get(
    "/{book_id}",
    summary="Get a book by id",
    response_model=schemas.Book,
    responses={404: {"description": "Book not found"}},
)
def get_book(book_id: str, db: Session = Depends(get_db)):
    """Devuelve el detalle de un libro por ID."""
    book = book_service.get_book(db, parse_id(book_id))
    if not book:
        raise HTTPException(status_code=404, detail=f"book {book_id} could not be found")
    return book


# -------------------------------
# POST /books (crea libro)
# -------------------------------
@router.post(
    "",
    summary="Create a book",
    response_model=schemas.Book,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "authorId does not reference an existing author"}},
)
def create_book(book: schemas.BookWrite, db: Session = Depends(get_db)):
    """
    Crea un libro.

    Body esperado:
    {
      "title": "Sapiens",
      "authorId": 3,
      "datePublished": "2011-01-01",
      "isFiction": false
    }
    """
    return book_service.create_book(db, book)


# -------------------------------
# PUT /books/{book_id} (reemplazo completo)
# -------------------------------
@router.put(
    "/{book_id}",
    summary="Update a book",
    response_model=schemas.Book,
    responses={404: {"description": "Book not found"}},
)
def update_book(book_id: str, book: schemas.BookWrite, db: Session = Depends(get_db)):
    """Reemplaza todos los campos del libro."""
    return book_service.update_book(db, book, parse_id(book_id))


# -------------------------------
# DELETE /books/{book_id}
# -------------------------------
@router.delete("/{book_id}", summary="Delete a book", response_model=schemas.BookDeleted)
def delete_book(book_id: str, db: Session = Depends(get_db)):
    book_service.delete_book(db, parse_id(book_id))
    return {"message": "book was deleted"}
