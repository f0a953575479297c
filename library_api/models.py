from sqlalchemy import Boolean, Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .database import Base


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column("firstName", String, nullable=False)
    last_name = Column("lastName", String, nullable=False)

    # Relación uno-a-muchos con libros.
    # passive_deletes="all": el ORM no toca los libros al borrar el autor,
    # la BD decide (ON DELETE RESTRICT).
    books = relationship("Book", back_populates="author", passive_deletes="all")


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    is_fiction = Column("isFiction", Boolean, nullable=False)
    date_published = Column("datePublished", Date, nullable=False)
    author_id = Column(
        "authorId",
        Integer,
        ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    author = relationship("Author", back_populates="books")
