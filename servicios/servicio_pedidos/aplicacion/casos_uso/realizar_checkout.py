# servicios/servicio_pedidos/aplicacion/casos_uso/realizar_checkout.py

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.servicio_pedidos.dominio.excepciones import DireccionInvalidaError
from servicios.servicio_pedidos.dominio.gestor_ordenes import OrderManager
from servicios.servicio_pedidos.dominio.orden import Order


class RealizarCheckout:
    """Convierte el carrito del usuario en una orden abierta."""

    def __init__(self, gestor_ordenes: OrderManager):
        self.gestor_ordenes = gestor_ordenes

    def ejecutar(self, usuario: User, direccion_entrega: str) -> Order:
        direccion = (direccion_entrega or '').strip()
        if not direccion:
            raise DireccionInvalidaError()
        return self.gestor_ordenes.checkout(usuario, direccion)
