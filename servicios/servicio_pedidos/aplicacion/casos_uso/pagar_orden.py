# servicios/servicio_pedidos/aplicacion/casos_uso/pagar_orden.py

import logging
from dataclasses import dataclass
from typing import Optional

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.servicio_pedidos.dominio.excepciones import (
    OrdenCerradaError,
    OrdenNoEncontradaError,
    PagoInvalidoError,
    PagoRechazadoError,
)
from servicios.servicio_pedidos.dominio.gestor_ordenes import OrderManager
from servicios.servicio_pedidos.dominio.orden import LONGITUD_TARJETA, Cash, CreditCard, Order

logger = logging.getLogger(__name__)

METODOS_EFECTIVO = ("cash", "pay on delivery")
METODOS_TARJETA = ("credit", "credit card")


@dataclass
class ResultadoPago:
    orden: Order
    cambio: float = 0.0


# ==============================================================================
# CASO DE USO: PAGAR ORDEN
# Valida el monto y el medio de pago ANTES de cerrar la orden; el cierre en
# el dominio solo verifica que la orden siga abierta.
# ==============================================================================
class PagarOrden:
    """
    Cierra una orden del usuario con efectivo o tarjeta de crédito.
    Si el pago se rechaza la orden queda intacta.
    """
    def __init__(self, gestor_ordenes: OrderManager):
        self.gestor_ordenes = gestor_ordenes

    def _buscar_orden(self, usuario: User, order_id: int) -> Order:
        # Recorrido lineal: el gestor no indexa por usuario
        for orden in self.gestor_ordenes.orders():
            if orden.order_id == order_id and orden.username == usuario.username:
                return orden
        raise OrdenNoEncontradaError(f"Orden #{order_id} no encontrada.")

    def ejecutar(self, usuario: User, order_id: int, metodo: str, monto: float,
                 numero_tarjeta: Optional[str] = None) -> ResultadoPago:
        """
        :raises OrdenNoEncontradaError: Si la orden no existe o es de otro usuario.
        :raises OrdenCerradaError: Si la orden ya fue pagada.
        :raises PagoInvalidoError: Si el número de tarjeta no tiene 16 caracteres.
        :raises PagoRechazadoError: Monto insuficiente o método no disponible.
        """
        orden = self._buscar_orden(usuario, order_id)
        if orden.state.is_closed:
            raise OrdenCerradaError(f"La orden #{order_id} ya está cerrada.")

        total = self.gestor_ordenes.total_price(orden)
        metodo = (metodo or '').strip().lower()
        cambio = 0.0

        if metodo in METODOS_EFECTIVO:
            if monto < total:
                raise PagoRechazadoError("Lo sentimos, el monto no alcanza.")
            cambio = monto - total
            pago = Cash()
        elif metodo in METODOS_TARJETA:
            numero_tarjeta = numero_tarjeta or ''
            if len(numero_tarjeta) != LONGITUD_TARJETA:
                raise PagoInvalidoError("Lo sentimos, el número de tarjeta es inválido.")
            if monto < total:
                raise PagoRechazadoError("Lo sentimos, no hay fondos suficientes en la tarjeta.")
            pago = CreditCard(card_number=numero_tarjeta)
        else:
            raise PagoRechazadoError("Este método de pago no está disponible.")

        if not self.gestor_ordenes.close(orden, pago):
            raise OrdenCerradaError(f"La orden #{order_id} ya está cerrada.")

        logger.info("Orden #%s pagada por %s (%s)", order_id, usuario.username, pago)
        return ResultadoPago(orden=orden, cambio=cambio)
