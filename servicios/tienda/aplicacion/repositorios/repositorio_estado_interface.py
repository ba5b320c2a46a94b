# servicios/tienda/aplicacion/repositorios/repositorio_estado_interface.py

from abc import ABC, abstractmethod

# Esta es la Interfaz (Contrato) que todo almacenamiento del estado de la tienda debe seguir.
# El dominio solo entrega y recibe bytes; el formato y el medio quedan aqui afuera.
class IRepositorioEstado(ABC):

    @abstractmethod
    def leer(self) -> bytes:
        """Retorna el último estado guardado. Lanza excepción si no hay o no se puede leer."""
        pass

    @abstractmethod
    def escribir(self, datos: bytes) -> None:
        """Reemplaza el estado guardado con ``datos`` en una sola escritura."""
        pass
