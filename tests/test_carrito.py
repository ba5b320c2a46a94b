"""Tests de Cart y OrderItem."""

import pytest

from servicios.servicio_catalogo.dominio.producto import Product
from servicios.servicio_pedidos.dominio.carrito import Cart


class TestAddItem:
    """Mezcla de items por código."""

    @pytest.mark.parametrize("cantidades", [[1.0], [1.0, 2.0], [0.5, 0.25, 0.25], [3.0, -1.0]])
    def test_un_item_por_codigo_con_suma(self, manzana: Product, cantidades) -> None:
        carrito = Cart()
        for cantidad in cantidades:
            carrito.add_item(manzana, cantidad)
        assert len(carrito) == 1
        assert carrito.items()[0].quantity == pytest.approx(sum(cantidades))

    def test_productos_distintos_en_orden(self, manzana: Product, pan: Product) -> None:
        carrito = Cart()
        carrito.add_item(pan, 1)
        carrito.add_item(manzana, 2)
        assert [i.code for i in carrito] == ["P1", "A1"]

    def test_copia_precio_actual(self, manzana: Product) -> None:
        carrito = Cart()
        carrito.add_item(manzana, 1)
        item = carrito.items()[0]
        assert (item.code, item.name, item.unit_price) == ("A1", "Manzana", 2.5)

    def test_cantidad_cero_permitida(self, manzana: Product) -> None:
        carrito = Cart()
        carrito.add_item(manzana, 0)
        assert carrito.items()[0].quantity == 0


class TestRemoveItem:

    def test_remove_y_volver_a_agregar_empieza_de_cero(self, manzana: Product) -> None:
        carrito = Cart()
        carrito.add_item(manzana, 5)
        carrito.remove_item("A1")
        carrito.add_item(manzana, 1)
        assert len(carrito) == 1
        assert carrito.items()[0].quantity == 1

    def test_remove_inexistente(self, manzana: Product) -> None:
        carrito = Cart()
        carrito.add_item(manzana, 1)
        carrito.remove_item("NO")
        assert len(carrito) == 1


class TestTotales:

    def test_total_price(self, manzana: Product, pan: Product) -> None:
        carrito = Cart()
        carrito.add_item(manzana, 2)  # 5.0
        carrito.add_item(pan, 1.5)    # 15.0
        assert carrito.total_price() == pytest.approx(20.0)

    def test_item_total_price(self, pan: Product) -> None:
        carrito = Cart()
        carrito.add_item(pan, 3)
        assert carrito.items()[0].total_price() == pytest.approx(30.0)

    def test_carrito_vacio(self) -> None:
        assert Cart().total_price() == 0


class TestTakeItems:

    def test_take_items_vacia_el_carrito(self, manzana: Product) -> None:
        carrito = Cart()
        carrito.add_item(manzana, 2)
        items = carrito.take_items()
        assert [i.code for i in items] == ["A1"]
        assert len(carrito) == 0
