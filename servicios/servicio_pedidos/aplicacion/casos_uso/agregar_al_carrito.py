# servicios/servicio_pedidos/aplicacion/casos_uso/agregar_al_carrito.py

from typing import Optional

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.servicio_catalogo.dominio.catalogo import Catalog
from servicios.servicio_catalogo.dominio.excepciones import ProductoNoEncontradoError
from servicios.servicio_pedidos.dominio.excepciones import CantidadInvalidaError
from servicios.servicio_pedidos.dominio.orden import OrderItem


class AgregarAlCarrito:
    """
    Agrega al carrito del usuario un producto elegido por su posición en el
    catálogo (base 1) o por su código.
    """
    def __init__(self, catalogo: Catalog):
        self.catalogo = catalogo

    def ejecutar(self, usuario: User, cantidad: float, indice: Optional[int] = None,
                 codigo: Optional[str] = None) -> OrderItem:
        """
        :raises ProductoNoEncontradoError: Si no hay producto con ese índice/código.
        :raises CantidadInvalidaError: Si la cantidad no es positiva.
        :returns: El item del carrito tras la suma.
        """
        if indice is not None:
            producto = self.catalogo.product_at(indice)
        elif codigo:
            producto = self.catalogo.find_product(codigo)
        else:
            producto = None

        if producto is None:
            raise ProductoNoEncontradoError("Lo sentimos, no hay un producto con ese índice o código.")

        if cantidad <= 0:
            raise CantidadInvalidaError()

        usuario.cart.add_item(producto, cantidad)
        return next(item for item in usuario.cart if item.code == producto.code)
