"""Tests de los casos de uso de carrito, checkout y pago."""

import pytest

from servicios.servicio_catalogo.dominio.catalogo import Catalog
from servicios.servicio_catalogo.dominio.excepciones import ProductoNoEncontradoError
from servicios.servicio_pedidos.aplicacion.casos_uso.agregar_al_carrito import AgregarAlCarrito
from servicios.servicio_pedidos.aplicacion.casos_uso.listar_ordenes import ListarOrdenes
from servicios.servicio_pedidos.aplicacion.casos_uso.pagar_orden import PagarOrden
from servicios.servicio_pedidos.aplicacion.casos_uso.realizar_checkout import RealizarCheckout
from servicios.servicio_pedidos.dominio.excepciones import (
    CantidadInvalidaError,
    DireccionInvalidaError,
    OrdenCerradaError,
    OrdenNoEncontradaError,
    PagoInvalidoError,
    PagoRechazadoError,
)
from servicios.servicio_pedidos.dominio.gestor_ordenes import OrderManager
from servicios.servicio_pedidos.dominio.orden import Cash, CreditCard

TARJETA = "1234567812345678"


@pytest.fixture
def gestor_ordenes() -> OrderManager:
    return OrderManager()


@pytest.fixture
def orden_alice(alice, catalogo: Catalog, gestor_ordenes: OrderManager):
    """Orden abierta de alice por 15.0 (2 manzanas + 1 pan)."""
    AgregarAlCarrito(catalogo).ejecutar(alice, 2, indice=1)
    AgregarAlCarrito(catalogo).ejecutar(alice, 1, codigo="P1")
    return RealizarCheckout(gestor_ordenes).ejecutar(alice, "Calle 1")


class TestAgregarAlCarrito:

    def test_por_indice_y_codigo(self, alice, catalogo: Catalog) -> None:
        caso = AgregarAlCarrito(catalogo)
        caso.ejecutar(alice, 1, indice=2)
        item = caso.ejecutar(alice, 2, codigo="P1")
        assert item.quantity == 3
        assert len(alice.cart) == 1

    @pytest.mark.parametrize("kwargs", [{"indice": 0}, {"indice": 9}, {"codigo": "NO"}, {}])
    def test_producto_inexistente(self, alice, catalogo: Catalog, kwargs) -> None:
        with pytest.raises(ProductoNoEncontradoError):
            AgregarAlCarrito(catalogo).ejecutar(alice, 1, **kwargs)
        assert len(alice.cart) == 0

    @pytest.mark.parametrize("cantidad", [0, -2])
    def test_cantidad_no_positiva(self, alice, catalogo: Catalog, cantidad) -> None:
        with pytest.raises(CantidadInvalidaError):
            AgregarAlCarrito(catalogo).ejecutar(alice, cantidad, indice=1)
        assert len(alice.cart) == 0


class TestRealizarCheckout:

    def test_direccion_requerida(self, alice, gestor_ordenes: OrderManager) -> None:
        with pytest.raises(DireccionInvalidaError):
            RealizarCheckout(gestor_ordenes).ejecutar(alice, "   ")
        assert gestor_ordenes.orders() == ()


class TestPagarOrden:

    def test_efectivo_con_cambio(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        resultado = PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "cash", 20.0)
        assert resultado.cambio == pytest.approx(5.0)
        assert orden_alice.state.payment == Cash()

    def test_pago_contra_entrega_exacto(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        resultado = PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "pay on delivery", 15.0)
        assert resultado.cambio == 0
        assert orden_alice.state.is_closed

    def test_efectivo_insuficiente(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        with pytest.raises(PagoRechazadoError):
            PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "cash", 14.99)
        assert orden_alice.state.is_open

    def test_tarjeta(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "credit card", 100.0, TARJETA)
        assert orden_alice.state.payment == CreditCard(TARJETA)

    def test_tarjeta_numero_invalido(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        with pytest.raises(PagoInvalidoError):
            PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "credit", 100.0, "1234")
        assert orden_alice.state.is_open

    def test_tarjeta_sin_fondos(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        with pytest.raises(PagoRechazadoError):
            PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "credit", 1.0, TARJETA)
        assert orden_alice.state.is_open

    def test_metodo_desconocido(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        with pytest.raises(PagoRechazadoError):
            PagarOrden(gestor_ordenes).ejecutar(alice, orden_alice.order_id, "bitcoin", 100.0)

    def test_orden_de_otro_usuario(self, gestor_usuarios, orden_alice, gestor_ordenes: OrderManager) -> None:
        admin = gestor_usuarios.find_user("admin")
        with pytest.raises(OrdenNoEncontradaError):
            PagarOrden(gestor_ordenes).ejecutar(admin, orden_alice.order_id, "cash", 100.0)

    def test_orden_inexistente(self, alice, gestor_ordenes: OrderManager) -> None:
        with pytest.raises(OrdenNoEncontradaError):
            PagarOrden(gestor_ordenes).ejecutar(alice, 42, "cash", 100.0)

    def test_orden_ya_cerrada(self, alice, orden_alice, gestor_ordenes: OrderManager) -> None:
        caso = PagarOrden(gestor_ordenes)
        caso.ejecutar(alice, orden_alice.order_id, "cash", 15.0)
        with pytest.raises(OrdenCerradaError):
            caso.ejecutar(alice, orden_alice.order_id, "credit", 15.0, TARJETA)
        assert orden_alice.state.payment == Cash()


class TestListarOrdenes:

    def test_cliente_ve_solo_las_suyas(self, alice, gestor_usuarios, gestor_ordenes: OrderManager) -> None:
        admin = gestor_usuarios.find_user("admin")
        gestor_ordenes.checkout(alice, "A")
        gestor_ordenes.checkout(admin, "B")
        assert [o.username for o in ListarOrdenes(gestor_ordenes).ejecutar(alice)] == ["alice"]

    def test_admin_ve_todas(self, alice, gestor_usuarios, gestor_ordenes: OrderManager) -> None:
        admin = gestor_usuarios.find_user("admin")
        gestor_ordenes.checkout(alice, "A")
        gestor_ordenes.checkout(admin, "B")
        assert len(ListarOrdenes(gestor_ordenes).ejecutar(admin)) == 2
