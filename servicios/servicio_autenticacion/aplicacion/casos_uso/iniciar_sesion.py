# servicios/servicio_autenticacion/aplicacion/casos_uso/iniciar_sesion.py

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.servicio_autenticacion.dominio.gestor_usuarios import UserManager
from servicios.servicio_autenticacion.dominio.excepciones import CredencialesInvalidasError

# ==============================================================================
# CASO DE USO: INICIAR SESION
# Logica de negocio para verificar credenciales.
# ==============================================================================
class IniciarSesion:
    """
    Caso de Uso responsable de autenticar a un usuario con su nombre y password.
    """
    def __init__(self, gestor_usuarios: UserManager):
        self.gestor_usuarios = gestor_usuarios

    def ejecutar(self, username: str, password: str) -> User:
        """
        Busca el usuario y verifica la contraseña.

        :raises CredencialesInvalidasError: Si el usuario no existe o la contraseña es incorrecta.
        :returns: La entidad User autenticada.
        """
        usuario = self.gestor_usuarios.user_login(username, password)

        if usuario is None:
            # Mismo error en ambos casos, no revelamos cual fallo
            raise CredencialesInvalidasError()

        return usuario
