class ExcepcionDominio(ValueError):
    """Clase base para todas las excepciones de dominio del catálogo."""
    pass

class ProductoNoEncontradoError(ExcepcionDominio):
    """Excepción lanzada cuando un producto no existe en el catálogo."""
    def __init__(self, mensaje="El producto solicitado no fue encontrado."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class DatosDeProductoInvalidosError(ExcepcionDominio):
    """Excepción lanzada cuando los datos de entrada para un producto son inválidos."""
    def __init__(self, mensaje="Los datos de producto proporcionados son inválidos."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class ProductoDuplicadoError(ExcepcionDominio):
    """Excepción lanzada cuando ya existe un producto con el mismo código."""
    def __init__(self, mensaje="Ya existe un producto con ese código en el catálogo."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)
