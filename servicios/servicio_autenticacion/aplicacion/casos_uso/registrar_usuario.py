# servicios/servicio_autenticacion/aplicacion/casos_uso/registrar_usuario.py

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.servicio_autenticacion.dominio.gestor_usuarios import UserManager
from servicios.servicio_autenticacion.dominio.excepciones import UsuarioDuplicadoError

# ==============================================================================
# CASO DE USO: REGISTRAR USUARIO
# Este modulo contiene la logica de negocio pura para el registro.
# Es independiente de Flask o de la forma de persistencia.
# ==============================================================================
class RegistrarUsuario:
    """
    Caso de Uso responsable de registrar un nuevo usuario en la tienda.
    """
    def __init__(self, gestor_usuarios: UserManager):
        self.gestor_usuarios = gestor_usuarios

    def ejecutar(self, username: str, password: str, email: str) -> User:
        """
        Ejecuta la logica de registro.

        :raises UsuarioDuplicadoError: Si el nombre de usuario ya existe.
        :returns: La entidad User recien creada.
        """
        if not self.gestor_usuarios.add_user(username, password, email):
            raise UsuarioDuplicadoError(f"El usuario '{username}' ya se encuentra registrado.")

        return self.gestor_usuarios.find_user(username)
