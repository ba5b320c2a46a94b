# servicios/tienda/infraestructura/persistencia/sql_repositorio_estado.py

# ==============================================================================
# IMPORTACIONES CLAVE
# ==============================================================================
from typing import Optional

# Contrato de la capa de aplicación
from servicios.tienda.aplicacion.repositorios.repositorio_estado_interface import IRepositorioEstado

from inicializar_db import EstadoAplicacionORM, get_engine_and_session, inicializar_base_datos, resolve_db_uri

ID_ESTADO = 1

# ==============================================================================
# IMPLEMENTACIÓN DEL REPOSITORIO DE ESTADO (INFRAESTRUCTURA)
# ==============================================================================
class SQLRepositorioEstado(IRepositorioEstado):
    """
    Adaptador de persistencia que implementa IRepositorioEstado
    utilizando SQLAlchemy (SQLite por defecto, cualquier URI soportada).
    """

    def __init__(self, db_uri: Optional[str] = None):
        # El motor y las tablas se crean en el primer leer() o escribir()
        self.db_uri = db_uri
        self.engine = None
        self.Session = None

    def _nueva_sesion(self):
        if self.Session is None:
            engine, Session = get_engine_and_session(resolve_db_uri(self.db_uri))
            inicializar_base_datos(engine)
            self.engine, self.Session = engine, Session
        return self.Session()

    def leer(self) -> bytes:
        session = self._nueva_sesion()
        try:
            orm_estado = session.get(EstadoAplicacionORM, ID_ESTADO)
            if orm_estado is None:
                raise LookupError("No hay estado guardado en la base de datos.")
            return bytes(orm_estado.datos)
        finally:
            session.close()

    def escribir(self, datos: bytes) -> None:
        """Guarda o reemplaza el estado (UPSERT) en una sola transacción."""
        session = self._nueva_sesion()
        try:
            orm_estado = session.get(EstadoAplicacionORM, ID_ESTADO)
            if orm_estado:
                orm_estado.datos = datos
            else:
                session.add(EstadoAplicacionORM(id=ID_ESTADO, datos=datos))
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
