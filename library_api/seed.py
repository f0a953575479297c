"""
Datos de ejemplo: tres autores y cuatro libros de Yuval Noah Harari.

Uso:
    python -m library_api.seed      (o el script library-seed)
"""

import logging
from datetime import date

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from library_api import database, models
from library_api.config import get_settings
from library_api.observability import setup_logging

logger = logging.getLogger(__name__)

AUTHORS = [
    {"first_name": "jon", "last_name": "doe"},
    {"first_name": "william", "last_name": "shakes"},
    {"first_name": "Yuval Noah", "last_name": "Harari"},
]

BOOKS = [
    {"title": "sapien", "is_fiction": False},
    {"title": "homo deus", "is_fiction": False},
    {"title": "the ugly duckling", "is_fiction": True},
    {"title": "the little prince", "is_fiction": True},
]


def seed(db: Session) -> bool:
    """
    Inserta los datos de ejemplo. No hace nada si ya hay autores.

    Devuelve True si insertó datos.
    """
    if db.scalar(select(func.count()).select_from(models.Author)):
        logger.info("La BD ya tiene autores, no se siembra nada")
        return False

    authors = [models.Author(**a) for a in AUTHORS]
    db.add_all(authors)
    db.flush()

    harari = next(a for a in authors if a.first_name == "Yuval Noah")
    today = date.today()
    db.add_all(
        models.Book(author_id=harari.id, date_published=today, **b) for b in BOOKS
    )
    db.commit()
    logger.info("Sembrados %s autores y %s libros", len(AUTHORS), len(BOOKS))
    return True


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    database.init_db(settings.database_url)
    db = database.SessionLocal()
    try:
        seed(db)
    finally:
        db.close()
        database.dispose_db()


if __name__ == "__main__":
    main()
