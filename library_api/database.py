import logging
import sqlite3

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# El engine se crea al arrancar (init_db), no al importar el módulo
engine = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

# Aquí se define la base para que models.py la pueda importar
Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite no aplica las FK (ni ON DELETE RESTRICT) salvo que se active por conexión
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(database_url: str, create_tables: bool = True) -> Engine:
    """
    Crea el engine, enlaza SessionLocal y (opcionalmente) crea las tablas.

    create_all es idempotente (checkfirst); para un esquema que evoluciona
    habría que pasar a migraciones.
    """
    global engine
    # Registra los modelos en Base.metadata antes de create_all
    from library_api import models  # noqa: F401

    engine = create_engine(database_url, pool_pre_ping=True)
    SessionLocal.configure(bind=engine)

    if create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Tablas verificadas/creadas correctamente.")
    return engine


def dispose_db() -> None:
    global engine
    if engine is not None:
        engine.dispose()
        engine = None


def check_connection(bind=None) -> None:
    """Abre una conexión y ejecuta SELECT 1. Propaga el error si la BD no responde."""
    bind = bind if bind is not None else engine
    if bind is None:
        raise RuntimeError("Database engine is not initialized")
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
