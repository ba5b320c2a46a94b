# servicios/tienda/dominio/aplicacion.py

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from passlib.hash import pbkdf2_sha256

from servicios.servicio_autenticacion.dominio.gestor_usuarios import ADMIN_USERNAME, UserManager
from servicios.servicio_catalogo.dominio.catalogo import Catalog
from servicios.servicio_pedidos.dominio.gestor_ordenes import OrderManager
from servicios.tienda.aplicacion.repositorios.repositorio_estado_interface import IRepositorioEstado

logger = logging.getLogger(__name__)

# ==============================================================================
# RAIZ DEL AGREGADO: APLICACION
# Compone usuarios, catalogo y ordenes. Es la unidad de persistencia: se carga
# una vez al iniciar y se guarda al terminar (o cuando se pide).
# ==============================================================================
class Application:
    """Estado completo de la tienda."""

    def __init__(self, user_manager: Optional[UserManager] = None,
                 catalog: Optional[Catalog] = None,
                 order_manager: Optional[OrderManager] = None):
        self.user_manager = user_manager if user_manager is not None else UserManager()
        self.catalog = catalog if catalog is not None else Catalog()
        self.order_manager = order_manager if order_manager is not None else OrderManager()

    # --------------------------------------------------------------------------
    # Snapshot
    # --------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        data.update(self.user_manager.to_dict())
        data.update(self.catalog.to_dict())
        data.update(self.order_manager.to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], hasher=pbkdf2_sha256,
                  admin_username: str = ADMIN_USERNAME) -> Application:
        if not isinstance(data, dict):
            raise ValueError("El estado guardado no es un objeto.")
        return cls(
            user_manager=UserManager.from_dict(data, hasher=hasher, admin_username=admin_username),
            catalog=Catalog.from_dict(data),
            order_manager=OrderManager.from_dict(data),
        )

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2).encode("utf-8")

    @classmethod
    def from_bytes(cls, datos: bytes, hasher=pbkdf2_sha256,
                   admin_username: str = ADMIN_USERNAME) -> Application:
        return cls.from_dict(json.loads(datos.decode("utf-8")), hasher=hasher,
                             admin_username=admin_username)

    # --------------------------------------------------------------------------
    # Carga / guardado
    # --------------------------------------------------------------------------
    @classmethod
    def load(cls, repositorio: IRepositorioEstado, hasher=pbkdf2_sha256,
             admin_username: str = ADMIN_USERNAME) -> Application:
        """
        Lee y decodifica el estado guardado. Cualquier falla (no existe,
        contenido corrupto) deja una aplicación vacía; no es un error fatal.
        """
        try:
            datos = repositorio.leer()
            app = cls.from_bytes(datos, hasher=hasher, admin_username=admin_username)
        except Exception as e:
            logger.warning("No se pudo cargar el estado, se inicia vacío: %s", e)
            return cls(user_manager=UserManager(hasher=hasher, admin_username=admin_username))

        logger.info(
            "Estado cargado: %d usuarios, %d productos, %d órdenes",
            len(app.user_manager.users()), len(app.catalog), len(app.order_manager.orders()),
        )
        return app

    def save(self, repositorio: IRepositorioEstado) -> bool:
        """
        Codifica todo el estado en memoria y luego lo escribe una sola vez.

        :returns: False si falla la codificación o la escritura (el estado
                  anterior queda como estaba), True si se guardó.
        """
        try:
            datos = self.to_bytes()
        except (TypeError, ValueError) as e:
            logger.error("No se pudo codificar el estado: %s", e)
            return False

        try:
            repositorio.escribir(datos)
        except Exception:
            logger.exception("No se pudo escribir el estado")
            return False
        return True
