from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from library_api import schemas
from library_api.database import get_db
from library_api.routers import parse_id
from library_api.services import authors as author_service

router = APIRouter(prefix="/authors", tags=["authors"])


# -------------------------------
# GET /authors (listar autores)
# -------------------------------
@router.get("", summary="List authors", response_model=List[schemas.Author])
def list_authors(db: Session = Depends(get_db)):
    """Lista todos los autores."""
    return author_service.list_authors(db)


# -------------------------------
# GET /authors/{author_id}
# -------------------------------
@router.get(
    "/{author_id}",
    summary="Get an author by id",
    response_model=schemas.Author,
    responses={404: {"description": "Author not found"}},
)
def read_author(author_id: str, db: Session = Depends(get_db)):
    """Obtiene un autor por id."""
    author = author_service.get_author(db, parse_id(author_id))
    if not author:
        raise HTTPException(status_code=404, detail=f"author {author_id} could not be found")
    return author


# -------------------------------
# GET /authors/{author_id}/books
# -------------------------------
@router.get("/{author_id}/books", summary="List an author's books", response_model=List[schemas.Book])
def read_author_books(author_id: str, db: Session = Depends(get_db)):
    """Devuelve los libros de un autor (404 si el autor no existe)."""
    return author_service.list_author_books(db, parse_id(author_id))


# -------------------------------
# POST /authors (crea autor)
# -------------------------------
@router.post(
    "",
    summary="Create an author",
    response_model=schemas.Author,
    status_code=status.HTTP_201_CREATED,
)
def create_author(author: schemas.AuthorCreate, db: Session = Depends(get_db)):
    """
    Crea un autor.

    Body esperado:
    {
      "firstName": "Ada",
      "lastName": "Lovelace"
    }
    """
    return author_service.create_author(db, author)


# -------------------------------
# PUT /authors/{author_id} (reemplazo completo)
# -------------------------------
@router.put("/{author_id}", summary="Update an author", response_model=schemas.Author)
def update_author(author_id: str, author: schemas.AuthorCreate, db: Session = Depends(get_db)):
    """Reemplaza firstName/lastName. 404 si el autor no existe."""
    return author_service.update_author(db, author, parse_id(author_id))


# -------------------------------
# DELETE /authors/{author_id}
# -------------------------------
@router.delete(
    "/{author_id}",
    summary="Delete an author",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={409: {"description": "The author still has books"}},
)
def delete_author(author_id: str, db: Session = Depends(get_db)):
    """Borra un autor. 409 si todavía tiene libros."""
    author_service.delete_author(db, parse_id(author_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
