# servicios/servicio_pedidos/presentacion/vistas.py

from servicios.servicio_pedidos.dominio.carrito import Cart
from servicios.servicio_pedidos.dominio.orden import Order, OrderItem

# Representaciones JSON de carrito y ordenes. Solo usan los accesores
# publicos de las entidades.


def vista_item(item: OrderItem) -> dict:
    return {
        'code': item.code,
        'name': item.name,
        'unit_price': round(item.unit_price, 2),
        'quantity': item.quantity,
        'total_price': round(item.total_price(), 2),
    }


def vista_carrito(carrito: Cart) -> dict:
    return {
        'items': [vista_item(item) for item in carrito],
        'cantidad_items': len(carrito),
        'total_cost': round(carrito.total_price(), 2),
    }


def vista_orden(orden: Order) -> dict:
    estado = orden.state
    return {
        'order_id': orden.order_id,
        'username': orden.username,
        'delivery_address': orden.delivery_address,
        'costs': round(orden.total_price(), 2),
        'state': str(estado),
        'pay_by': str(estado.payment) if estado.payment is not None else None,
        'items': [vista_item(item) for item in orden.items],
    }
