class ExcepcionDominio(ValueError):
    """Clase base para las excepciones de dominio de pedidos."""
    pass

class PagoInvalidoError(ExcepcionDominio):
    """Los datos del medio de pago no cumplen las reglas (p.ej. número de tarjeta)."""
    def __init__(self, mensaje="Los datos del pago son inválidos."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class PagoRechazadoError(ExcepcionDominio):
    """El pago no cubre el total o el método de pago no está disponible."""
    def __init__(self, mensaje="El pago fue rechazado."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class OrdenNoEncontradaError(ExcepcionDominio):
    """No existe una orden con ese ID para el usuario."""
    def __init__(self, mensaje="Orden no encontrada."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class OrdenCerradaError(ExcepcionDominio):
    """La orden ya fue pagada y no admite otro cierre."""
    def __init__(self, mensaje="La orden ya está cerrada."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class CantidadInvalidaError(ExcepcionDominio):
    """La cantidad solicitada para el carrito no es válida."""
    def __init__(self, mensaje="La cantidad debe ser mayor que cero."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class DireccionInvalidaError(ExcepcionDominio):
    """Falta la dirección de entrega al hacer checkout."""
    def __init__(self, mensaje="La dirección de entrega es requerida."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)
