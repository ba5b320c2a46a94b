# servicios/servicio_catalogo/aplicacion/casos_uso/administrar_catalogo.py
from dataclasses import dataclass

# Dominio
from servicios.servicio_catalogo.dominio.catalogo import Catalog
from servicios.servicio_catalogo.dominio.producto import Product
from servicios.servicio_catalogo.dominio.excepciones import ProductoDuplicadoError


@dataclass
class AdministrarCatalogo:
    """
    Caso de uso de administración del catálogo (altas y bajas).
    El control de que quien llama es administrador queda en la presentación.
    """
    catalogo: Catalog

    def agregar(self, codigo: str, nombre: str, precio: float) -> Product:
        """
        :raises DatosDeProductoInvalidosError: código vacío o precio negativo.
        :raises ProductoDuplicadoError: ya existe un producto con ese código.
        """
        producto = Product(code=(codigo or '').strip(), name=(nombre or '').strip(), unit_price=precio)
        if not self.catalogo.add_product(producto):
            raise ProductoDuplicadoError(f"Ya existe un producto con código '{producto.code}'.")
        return producto

    def eliminar(self, codigo: str) -> None:
        self.catalogo.remove_product(codigo)
