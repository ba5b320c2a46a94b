# inicializar_db.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy import (
    create_engine,
    Column,
    Integer,
    LargeBinary,
    DateTime,
    func,
)
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.exc import SQLAlchemyError

from configuracion import Config

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# Base ORM
# ----------------------------------------------------------------------
Base = declarative_base()

# ----------------------------------------------------------------------
# Modelos ORM
# ----------------------------------------------------------------------
class EstadoAplicacionORM(Base):
    """
    Tabla con el snapshot completo de la tienda.
    - id: siempre 1 (una sola fila; el estado se reemplaza entero)
    - datos: bytes codificados por Application.to_bytes()
    """
    __tablename__ = "estado_aplicacion"

    id = Column(Integer, primary_key=True)
    datos = Column(LargeBinary, nullable=False)

    # Timestamps básicos
    creado_en = Column(DateTime, server_default=func.now(), nullable=False)
    actualizado_en = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)


# ----------------------------------------------------------------------
# Helpers DB
# ----------------------------------------------------------------------
def resolve_db_uri(db_uri: Optional[str] = None) -> str:
    """
    Devuelve la URI de la base de datos a usar.
    1) La recibida como argumento.
    2) Si no, Config.SQLALCHEMY_DATABASE_URI.
    Si es SQLite en archivo, se asegura de que la carpeta exista.
    """
    db_uri = db_uri or Config.SQLALCHEMY_DATABASE_URI
    if db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        sqlite_file = Path(db_uri.replace("sqlite:///", "", 1))
        sqlite_file.parent.mkdir(parents=True, exist_ok=True)
    return db_uri


def get_engine_and_session(db_uri: str):
    engine = create_engine(db_uri, echo=False, future=True)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    return engine, SessionLocal


# ----------------------------------------------------------------------
# Inicialización
# ----------------------------------------------------------------------
def inicializar_base_datos(engine=None):
    """Crea las tablas si no existen."""
    if engine is None:
        engine, _ = get_engine_and_session(resolve_db_uri())
    try:
        Base.metadata.create_all(engine)
        logger.info("Tablas creadas/verificadas en: %s", engine.url)
    except SQLAlchemyError as e:
        logger.error("Error durante la inicialización de la base de datos: %s", e)
        raise
    return engine


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    inicializar_base_datos()
