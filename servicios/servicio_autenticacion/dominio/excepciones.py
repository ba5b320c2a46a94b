class ExcepcionDominio(ValueError):
    """Clase base para las excepciones de autenticación."""
    pass

class UsuarioDuplicadoError(ExcepcionDominio):
    """El nombre de usuario ya está registrado."""
    def __init__(self, mensaje="El nombre de usuario ya se encuentra registrado."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)

class CredencialesInvalidasError(ExcepcionDominio):
    """Usuario inexistente o contraseña incorrecta (no se distinguen)."""
    def __init__(self, mensaje="Credenciales inválidas. Verifique su usuario y contraseña."):
        self.mensaje = mensaje
        super().__init__(self.mensaje)
