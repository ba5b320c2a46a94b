# servicios/servicio_pedidos/aplicacion/casos_uso/listar_ordenes.py

from typing import List

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.servicio_pedidos.dominio.gestor_ordenes import OrderManager
from servicios.servicio_pedidos.dominio.orden import Order


class ListarOrdenes:
    """El administrador ve todas las órdenes; el resto solo las suyas."""

    def __init__(self, gestor_ordenes: OrderManager):
        self.gestor_ordenes = gestor_ordenes

    def ejecutar(self, usuario: User) -> List[Order]:
        ordenes = self.gestor_ordenes.orders()
        if usuario.is_admin():
            return list(ordenes)
        return [o for o in ordenes if o.username == usuario.username]
