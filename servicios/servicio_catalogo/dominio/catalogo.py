# servicios/servicio_catalogo/dominio/catalogo.py

import logging
from typing import Any, Dict, List, Optional, Tuple

from servicios.servicio_catalogo.dominio.producto import Product

logger = logging.getLogger(__name__)

# ==============================================================================
# AGREGADO: CATALOGO
# Coleccion ordenada de productos. El orden de insercion es el que se usa para
# la seleccion por indice (base 1) desde la capa de presentacion.
# ==============================================================================
class Catalog:
    """Colección autoritativa de productos, indexada por código."""

    def __init__(self, products: Optional[List[Product]] = None):
        self._products: List[Product] = []
        for product in products or []:
            self.add_product(product)

    def add_product(self, product: Product) -> bool:
        """
        Agrega un producto al final del catálogo.

        :returns: False si ya existe un producto con el mismo código
                  (el catálogo no se modifica), True en caso contrario.
        """
        if self.find_product(product.code) is not None:
            logger.info("Producto duplicado rechazado: %s", product.code)
            return False
        self._products.append(product)
        return True

    def remove_product(self, code: str) -> None:
        """Elimina los productos con ese código; no hace nada si no existe."""
        self._products = [p for p in self._products if p.code != code]

    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    def find_product(self, code: str) -> Optional[Product]:
        for product in self._products:
            if product.code == code:
                return product
        return None

    def product_at(self, index: int) -> Optional[Product]:
        """Devuelve el producto en la posición ``index`` (base 1) o None."""
        if index < 1 or index > len(self._products):
            return None
        return self._products[index - 1]

    def __len__(self) -> int:
        return len(self._products)

    # --------------------------------------------------------------------------
    # Snapshot (persistencia)
    # --------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {'products': [p.to_dict() for p in self._products]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Catalog":
        return cls([Product.from_dict(p) for p in data.get('products', [])])
