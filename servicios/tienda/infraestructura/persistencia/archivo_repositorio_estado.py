# servicios/tienda/infraestructura/persistencia/archivo_repositorio_estado.py

from pathlib import Path
from typing import Union

from servicios.tienda.aplicacion.repositorios.repositorio_estado_interface import IRepositorioEstado


class ArchivoRepositorioEstado(IRepositorioEstado):
    """Guarda el estado de la tienda en un archivo local."""

    def __init__(self, ruta: Union[str, Path]):
        self.ruta = Path(ruta)

    def leer(self) -> bytes:
        return self.ruta.read_bytes()

    def escribir(self, datos: bytes) -> None:
        # Los bytes llegan completos; una sola escritura
        self.ruta.parent.mkdir(parents=True, exist_ok=True)
        self.ruta.write_bytes(datos)
