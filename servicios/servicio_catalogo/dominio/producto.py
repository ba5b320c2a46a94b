# servicios/servicio_catalogo/dominio/producto.py

import math
from dataclasses import dataclass
from typing import Any, Dict

from servicios.servicio_catalogo.dominio.excepciones import DatosDeProductoInvalidosError

# ==============================================================================
# ENTIDAD DE DOMINIO: PRODUCTO
# Valor inmutable una vez creado. Se copia por valor dentro de cada OrderItem,
# asi que editar el catalogo nunca altera carritos ni ordenes existentes.
# ==============================================================================
@dataclass(frozen=True)
class Product:
    """Producto del catálogo: código único, nombre y precio unitario."""
    code: str
    name: str
    unit_price: float

    def __post_init__(self):
        if not self.code:
            raise DatosDeProductoInvalidosError("El código del producto no puede estar vacío.")
        if not math.isfinite(self.unit_price) or self.unit_price < 0:
            raise DatosDeProductoInvalidosError("El precio unitario debe ser un número no negativo.")

    def to_dict(self) -> Dict[str, Any]:
        """Convierte la entidad en un diccionario para serialización."""
        return {
            'code': self.code,
            'name': self.name,
            'price': self.unit_price,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        return cls(
            code=str(data['code']),
            name=str(data['name']),
            unit_price=float(data['price']),
        )

    def __repr__(self) -> str:
        return f"<Product code={self.code}, name='{self.name}'>"
