# servicios/servicio_pedidos/dominio/orden.py

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from servicios.servicio_catalogo.dominio.producto import Product
from servicios.servicio_pedidos.dominio.excepciones import PagoInvalidoError

LONGITUD_TARJETA = 16

ESTADO_ABIERTA = "open"
ESTADO_CERRADA = "closed"

# ==============================================================================
# ENTIDAD ORDEN ITEM (Detalle del Carrito)
# ==============================================================================
@dataclass(frozen=True)
class OrderItem:
    """Copia de un producto más la cantidad pedida."""
    product: Product
    quantity: float

    @property
    def code(self) -> str:
        return self.product.code

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def unit_price(self) -> float:
        return self.product.unit_price

    def total_price(self) -> float:
        """Calcula el costo total de este item."""
        return self.quantity * self.product.unit_price

    def to_dict(self) -> dict:
        data = self.product.to_dict()
        data['quantity'] = self.quantity
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderItem":
        return cls(product=Product.from_dict(data), quantity=float(data['quantity']))

# ==============================================================================
# MEDIOS DE PAGO
# ==============================================================================
class OrderPayment(ABC):
    """Medio con el que se cerró una orden (efectivo o tarjeta)."""

    @abstractmethod
    def to_dict(self) -> dict:
        pass

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "OrderPayment":
        metodo = data.get('payment_method')
        if metodo == 'cash':
            return Cash()
        if metodo == 'credit_card':
            return CreditCard(card_number=str(data['card_number']))
        raise PagoInvalidoError(f"Método de pago desconocido: {metodo!r}")


@dataclass(frozen=True)
class Cash(OrderPayment):

    def to_dict(self) -> dict:
        return {'payment_method': 'cash'}

    def __str__(self):
        return "cash"


@dataclass(frozen=True)
class CreditCard(OrderPayment):
    card_number: str

    def __post_init__(self):
        if len(self.card_number) != LONGITUD_TARJETA:
            raise PagoInvalidoError(
                f"El número de tarjeta debe tener {LONGITUD_TARJETA} caracteres."
            )

    def to_dict(self) -> dict:
        return {'payment_method': 'credit_card', 'card_number': self.card_number}

    def __str__(self):
        return f"credit card {self.card_number}"

# ==============================================================================
# ESTADO DE LA ORDEN
# Abierta (inicial) -> Cerrada con pago (terminal). No hay otras transiciones.
# ==============================================================================
@dataclass(frozen=True)
class OrderState:
    label: str = ESTADO_ABIERTA
    payment: Optional[OrderPayment] = None

    def __post_init__(self):
        if self.label not in (ESTADO_ABIERTA, ESTADO_CERRADA):
            raise ValueError(f"Estado de orden desconocido: {self.label!r}")
        if (self.label == ESTADO_CERRADA) != (self.payment is not None):
            raise ValueError("Solo una orden cerrada lleva pago, y siempre lo lleva.")

    @classmethod
    def open(cls) -> "OrderState":
        return cls()

    @classmethod
    def closed(cls, payment: OrderPayment) -> "OrderState":
        return cls(ESTADO_CERRADA, payment)

    @property
    def is_open(self) -> bool:
        return self.label == ESTADO_ABIERTA

    @property
    def is_closed(self) -> bool:
        return self.label == ESTADO_CERRADA

    def to_dict(self) -> dict:
        data = {'order_state': self.label}
        if self.payment is not None:
            data['payment'] = self.payment.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderState":
        if data.get('order_state') == ESTADO_CERRADA:
            return cls.closed(OrderPayment.from_dict(data.get('payment') or {}))
        return cls.open()

    def __str__(self):
        return self.label

# ==============================================================================
# ENTIDAD ORDEN
# ==============================================================================
class Order:
    """
    Pedido creado a partir del carrito de un usuario.

    Los items y el ID son inmutables; el único cambio permitido es el cierre
    (pago). El dueño se guarda por nombre de usuario, no como referencia.
    """
    def __init__(self, order_id: int, username: str, items: Iterable[OrderItem],
                 delivery_address: str, state: Optional[OrderState] = None):
        self._order_id = order_id
        self._username = username
        self._items: Tuple[OrderItem, ...] = tuple(items)
        self._delivery_address = delivery_address
        self._state = state if state else OrderState.open()

    @property
    def order_id(self) -> int:
        return self._order_id

    @property
    def username(self) -> str:
        return self._username

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return self._items

    @property
    def delivery_address(self) -> str:
        return self._delivery_address

    @property
    def state(self) -> OrderState:
        return self._state

    def total_price(self) -> float:
        """Suma los subtotales de todos los items en la orden."""
        return sum(item.total_price() for item in self._items)

    def close(self, payment: OrderPayment) -> bool:
        """
        Cierra la orden con el pago indicado.

        :returns: True si la orden estaba abierta; False si ya estaba cerrada
                  (en ese caso el estado no cambia).
        """
        if not self._state.is_open:
            return False
        self._state = OrderState.closed(payment)
        return True

    def to_dict(self) -> dict:
        data = {
            'order_id': self._order_id,
            'username': self._username,
            'items': [item.to_dict() for item in self._items],
            'delivery_address': self._delivery_address,
        }
        data.update(self._state.to_dict())
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        return cls(
            order_id=int(data['order_id']),
            username=str(data['username']),
            items=[OrderItem.from_dict(i) for i in data.get('items', [])],
            delivery_address=str(data.get('delivery_address', '')),
            state=OrderState.from_dict(data),
        )

    def __repr__(self) -> str:
        return f"<Order #{self._order_id} user={self._username} state={self._state}>"
