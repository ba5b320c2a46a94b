"""Configuración común de pytest: fixtures compartidos de la tienda."""

from __future__ import annotations

from pathlib import Path

import pytest
from passlib.hash import pbkdf2_sha256

from configuracion import Config
from servicios.servicio_autenticacion.dominio.gestor_usuarios import UserManager
from servicios.servicio_catalogo.dominio.catalogo import Catalog
from servicios.servicio_catalogo.dominio.producto import Product
from servicios.servicio_pedidos.dominio.gestor_ordenes import OrderManager
from servicios.tienda.dominio.aplicacion import Application
from servicios.tienda.infraestructura.persistencia.archivo_repositorio_estado import ArchivoRepositorioEstado


@pytest.fixture
def hasher():
    """Hasher de passlib con pocas rondas para que los tests sean rápidos."""
    return pbkdf2_sha256.using(rounds=1000)


@pytest.fixture
def manzana() -> Product:
    return Product(code="A1", name="Manzana", unit_price=2.5)


@pytest.fixture
def pan() -> Product:
    return Product(code="P1", name="Pan", unit_price=10.0)


@pytest.fixture
def catalogo(manzana: Product, pan: Product) -> Catalog:
    return Catalog([manzana, pan])


@pytest.fixture
def gestor_usuarios(hasher) -> UserManager:
    gestor = UserManager(hasher=hasher)
    gestor.add_user("alice", "pw", "a@x.com")
    gestor.add_user("admin", "secreto", "admin@x.com")
    return gestor


@pytest.fixture
def alice(gestor_usuarios: UserManager):
    return gestor_usuarios.find_user("alice")


@pytest.fixture
def tienda(gestor_usuarios: UserManager, catalogo: Catalog) -> Application:
    return Application(user_manager=gestor_usuarios, catalog=catalogo, order_manager=OrderManager())


@pytest.fixture
def repositorio_archivo(tmp_path: Path) -> ArchivoRepositorioEstado:
    return ArchivoRepositorioEstado(tmp_path / "corona.json")


@pytest.fixture
def app_flask(tienda: Application, repositorio_archivo: ArchivoRepositorioEstado):
    """App Flask de pruebas con la tienda precargada."""
    from app import crear_app

    class ConfigPruebas(Config):
        TESTING = True
        SECRET_KEY = "pruebas"
        LOG_LEVEL = "WARNING"

    return crear_app(ConfigPruebas, repositorio=repositorio_archivo, tienda=tienda)


@pytest.fixture
def client(app_flask):
    return app_flask.test_client()


@pytest.fixture
def login(client):
    """Inicia sesión en el cliente de pruebas con las credenciales dadas."""
    def _login(username: str, password: str):
        return client.post("/api/v1/auth/login", json={"username": username, "password": password})
    return _login
