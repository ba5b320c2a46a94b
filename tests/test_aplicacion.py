"""Tests del agregado Application y de los repositorios de estado."""

from pathlib import Path

import pytest

from servicios.servicio_catalogo.dominio.producto import Product
from servicios.servicio_pedidos.dominio.orden import Cash
from servicios.tienda.aplicacion.repositorios.repositorio_estado_interface import IRepositorioEstado
from servicios.tienda.dominio.aplicacion import Application
from servicios.tienda.infraestructura.persistencia.archivo_repositorio_estado import ArchivoRepositorioEstado
from servicios.tienda.infraestructura.persistencia.sql_repositorio_estado import SQLRepositorioEstado


class RepositorioQueFalla(IRepositorioEstado):
    """Repositorio que no puede leer ni escribir."""

    def leer(self) -> bytes:
        raise OSError("disco no disponible")

    def escribir(self, datos: bytes) -> None:
        raise OSError("disco lleno")


def _preparar(tienda: Application):
    alice = tienda.user_manager.find_user("alice")
    alice.cart.add_item(tienda.catalog.find_product("A1"), 2)
    orden = tienda.order_manager.checkout(alice, "Calle 1")
    tienda.order_manager.close(orden, Cash())
    tienda.order_manager.checkout(alice, "Calle 2")
    alice.cart.add_item(tienda.catalog.find_product("P1"), 1)


class TestSnapshot:

    def test_contiene_todo_el_estado(self, tienda: Application) -> None:
        _preparar(tienda)
        datos = tienda.to_dict()
        assert set(datos) == {"users", "products", "orders", "sequence_id"}
        assert datos["sequence_id"] == 2

    def test_from_bytes_invalido(self) -> None:
        with pytest.raises(ValueError):
            Application.from_bytes(b"[1, 2, 3]")


@pytest.mark.parametrize("backend", ["archivo", "db"])
class TestRoundTrip:

    def _repositorio(self, backend: str, tmp_path: Path) -> IRepositorioEstado:
        if backend == "db":
            return SQLRepositorioEstado(f"sqlite:///{(tmp_path / 'corona.sqlite').as_posix()}")
        return ArchivoRepositorioEstado(tmp_path / "corona.json")

    def test_save_load(self, backend: str, tmp_path: Path, tienda: Application, hasher) -> None:
        _preparar(tienda)
        repositorio = self._repositorio(backend, tmp_path)
        assert tienda.save(repositorio) is True

        cargada = Application.load(repositorio, hasher=hasher)

        assert cargada.to_dict() == tienda.to_dict()
        assert cargada.user_manager.user_login("alice", "pw") is not None
        assert cargada.user_manager.find_user("admin").is_admin()
        assert cargada.order_manager.find_order(0).state.payment == Cash()
        assert [i.code for i in cargada.user_manager.find_user("alice").cart] == ["P1"]

    def test_ids_siguen_creciendo(self, backend: str, tmp_path: Path, tienda: Application, hasher) -> None:
        _preparar(tienda)
        repositorio = self._repositorio(backend, tmp_path)
        tienda.save(repositorio)

        cargada = Application.load(repositorio, hasher=hasher)
        alice = cargada.user_manager.find_user("alice")
        orden = cargada.order_manager.checkout(alice, "Calle 3")
        assert orden.order_id > max(o.order_id for o in tienda.order_manager.orders())

    def test_guardar_dos_veces_reemplaza(self, backend: str, tmp_path: Path, tienda: Application, hasher) -> None:
        repositorio = self._repositorio(backend, tmp_path)
        tienda.save(repositorio)
        tienda.catalog.remove_product("A1")
        tienda.save(repositorio)
        cargada = Application.load(repositorio, hasher=hasher)
        assert [p.code for p in cargada.catalog.products()] == ["P1"]


class TestLoad:

    def test_archivo_inexistente_da_tienda_vacia(self, tmp_path: Path) -> None:
        tienda = Application.load(ArchivoRepositorioEstado(tmp_path / "no-existe.json"))
        assert tienda.user_manager.users() == ()
        assert tienda.catalog.products() == ()
        assert tienda.order_manager.orders() == ()
        assert tienda.order_manager.sequence_id == 0

    def test_contenido_corrupto_da_tienda_vacia(self, tmp_path: Path) -> None:
        ruta = tmp_path / "corona.json"
        ruta.write_bytes(b"{ esto no es json")
        tienda = Application.load(ArchivoRepositorioEstado(ruta))
        assert tienda.user_manager.users() == ()

    def test_db_sin_estado_da_tienda_vacia(self, tmp_path: Path) -> None:
        repositorio = SQLRepositorioEstado(f"sqlite:///{(tmp_path / 'vacia.sqlite').as_posix()}")
        assert Application.load(repositorio).catalog.products() == ()

    def test_tienda_vacia_usa_admin_configurado(self, tmp_path: Path, hasher) -> None:
        tienda = Application.load(ArchivoRepositorioEstado(tmp_path / "x.json"),
                                  hasher=hasher, admin_username="root")
        tienda.user_manager.add_user("root", "pw", "r@x.com")
        assert tienda.user_manager.find_user("root").is_admin()


class TestSave:

    def test_falla_de_escritura_devuelve_false(self, tienda: Application) -> None:
        assert tienda.save(RepositorioQueFalla()) is False

    def test_falla_no_toca_el_archivo_anterior(self, tmp_path: Path, tienda: Application) -> None:
        ruta = tmp_path / "corona.json"
        ruta.write_bytes(b"anterior")
        repositorio = ArchivoRepositorioEstado(ruta)

        tienda.catalog.add_product(Product(code="Z", name=object(), unit_price=1.0))  # no serializable
        assert tienda.save(repositorio) is False
        assert ruta.read_bytes() == b"anterior"


class TestBaseInaccesible:
    """La base de datos no se puede crear (la carpeta es un archivo)."""

    @pytest.fixture
    def repositorio(self, tmp_path: Path) -> SQLRepositorioEstado:
        bloqueo = tmp_path / "no-es-carpeta"
        bloqueo.write_text("x")
        return SQLRepositorioEstado(f"sqlite:///{(bloqueo / 'corona.sqlite').as_posix()}")

    def test_crear_repositorio_no_falla(self, repositorio: SQLRepositorioEstado) -> None:
        assert repositorio.engine is None

    def test_load_da_tienda_vacia(self, repositorio: SQLRepositorioEstado) -> None:
        tienda = Application.load(repositorio)
        assert tienda.user_manager.users() == ()
        assert tienda.order_manager.sequence_id == 0

    def test_save_devuelve_false(self, repositorio: SQLRepositorioEstado, tienda: Application) -> None:
        assert tienda.save(repositorio) is False
