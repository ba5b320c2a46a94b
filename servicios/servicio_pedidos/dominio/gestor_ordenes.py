# servicios/servicio_pedidos/dominio/gestor_ordenes.py

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from servicios.servicio_pedidos.dominio.orden import Order, OrderPayment

if TYPE_CHECKING:
    from servicios.servicio_autenticacion.dominio.usuario import User

logger = logging.getLogger(__name__)

# ==============================================================================
# GESTOR DE ORDENES
# Registro de ordenes con un contador de secuencia que solo crece: los IDs
# asignados nunca se reutilizan.
# ==============================================================================
class OrderManager:
    """Convierte carritos en órdenes (checkout) y cierra órdenes (pago)."""

    def __init__(self, orders: Optional[List[Order]] = None, sequence_id: int = 0):
        self._orders: List[Order] = list(orders or [])
        siguiente = max((o.order_id for o in self._orders), default=-1) + 1
        self._sequence_id = max(int(sequence_id), siguiente)

    @property
    def sequence_id(self) -> int:
        """ID que recibirá la próxima orden."""
        return self._sequence_id

    def checkout(self, user: User, delivery_address: str) -> Order:
        """
        Mueve todo el contenido del carrito del usuario a una nueva orden
        abierta. Un carrito vacío produce una orden sin items.
        """
        order_id = self._sequence_id
        self._sequence_id += 1

        order = Order(
            order_id=order_id,
            username=user.username,
            items=user.cart.take_items(),
            delivery_address=delivery_address,
        )
        self._orders.append(order)
        logger.info("Orden #%s creada para %s", order_id, user.username)
        return order

    def close(self, order: Order, payment: OrderPayment) -> bool:
        """Cierra la orden; False si ya estaba cerrada. No valida montos."""
        cerrada = order.close(payment)
        if not cerrada:
            logger.info("Orden #%s ya estaba cerrada", order.order_id)
        return cerrada

    def total_price(self, order: Order) -> float:
        return order.total_price()

    def orders(self) -> Tuple[Order, ...]:
        return tuple(self._orders)

    def find_order(self, order_id: int) -> Optional[Order]:
        for order in self._orders:
            if order.order_id == order_id:
                return order
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'orders': [o.to_dict() for o in self._orders],
            'sequence_id': self._sequence_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OrderManager:
        return cls(
            orders=[Order.from_dict(o) for o in data.get('orders', [])],
            sequence_id=int(data.get('sequence_id', 0)),
        )
