# servicios/servicio_pedidos/dominio/carrito.py

from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional, Tuple

from servicios.servicio_catalogo.dominio.producto import Product
from servicios.servicio_pedidos.dominio.orden import OrderItem

# ==============================================================================
# ENTIDAD CARRITO
# Un item por código de producto. Pertenece a un único usuario y se vacía
# (se mueve su contenido) al hacer checkout.
# ==============================================================================
class Cart:
    """Carrito de compras de un usuario."""

    def __init__(self, items: Optional[List[OrderItem]] = None):
        self._items: List[OrderItem] = list(items or [])

    def add_item(self, product: Product, quantity: float) -> None:
        """
        Suma ``quantity`` al item con el mismo código o agrega uno nuevo
        copiando el código, nombre y precio actuales del producto.
        La cantidad no se valida aquí.
        """
        for i, item in enumerate(self._items):
            if item.code == product.code:
                self._items[i] = replace(item, quantity=item.quantity + quantity)
                return
        self._items.append(OrderItem(product=product, quantity=quantity))

    def remove_item(self, code: str) -> None:
        self._items = [item for item in self._items if item.code != code]

    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    def total_price(self) -> float:
        return sum(item.total_price() for item in self._items)

    def take_items(self) -> List[OrderItem]:
        """Saca todos los items y deja el carrito vacío."""
        items, self._items = self._items, []
        return items

    def __iter__(self) -> Iterator[OrderItem]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def to_dict(self) -> Dict[str, Any]:
        return {'items': [item.to_dict() for item in self._items]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cart":
        return cls([OrderItem.from_dict(i) for i in data.get('items', [])])
