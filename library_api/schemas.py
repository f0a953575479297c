from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Rango de una columna INTEGER (ids asignados por la BD)
MAX_ID = 2**31 - 1


class CamelModel(BaseModel):
    # En el JSON los campos van en camelCase (firstName, isFiction...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# -------------------------------
# Autores
# -------------------------------
class AuthorBase(CamelModel):
    first_name: str
    last_name: str


class AuthorCreate(AuthorBase):
    pass


class Author(AuthorBase):
    """Vista de lectura de un autor: {id, firstName, lastName}."""
    id: int


# Versión ligera del autor para mostrarlo dentro del libro
class AuthorForBook(CamelModel):
    id: int
    first_name: str
    last_name: str


# -------------------------------
# Libros
# -------------------------------
class BookWrite(CamelModel):
    """
    Body de POST/PUT /books.

    datePublished llega como string; el servicio la convierte a fecha.
    """
    title: str
    author_id: int = Field(ge=1, le=MAX_ID)
    date_published: str
    is_fiction: bool


class Book(CamelModel):
    """Vista de lectura de un libro, con el autor embebido."""
    id: int
    title: str
    date_published: date
    is_fiction: bool
    author: AuthorForBook


class BookDeleted(BaseModel):
    message: str
