# servicios/servicio_autenticacion/dominio/gestor_usuarios.py

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from passlib.hash import pbkdf2_sha256

from servicios.servicio_autenticacion.dominio.usuario import Rol, User

logger = logging.getLogger(__name__)

ADMIN_USERNAME = "admin"

# ==============================================================================
# GESTOR DE USUARIOS
# Registro de usuarios. El conjunto de nombres tomados siempre refleja
# exactamente los usuarios presentes; no se persiste, se reconstruye.
# ==============================================================================
class UserManager:
    """
    Registra usuarios y verifica credenciales.

    - hasher: objeto con ``hash(password)`` y ``verify(password, hash)``
      (e.g., un handler de passlib).
    """

    def __init__(self, users: Optional[List[User]] = None, hasher=pbkdf2_sha256,
                 admin_username: str = ADMIN_USERNAME):
        self.hasher = hasher
        self.admin_username = admin_username
        self._users: List[User] = []
        self._usernames_taken: Set[str] = set()
        for user in users or []:
            if user.username in self._usernames_taken:
                logger.warning("Usuario duplicado ignorado al restaurar: %s", user.username)
                continue
            self._users.append(user)
            self._usernames_taken.add(user.username)

    def add_user(self, username: str, password: str, email: str) -> bool:
        """
        Registra un usuario nuevo con carrito vacío.

        :returns: False si el nombre de usuario ya existe, True si se creó.
        """
        if username in self._usernames_taken:
            logger.info("Registro rechazado, usuario existente: %s", username)
            return False

        password_hash = self.hasher.hash(password)
        rol = Rol.ADMIN if username == self.admin_username else Rol.CLIENTE

        self._users.append(User(
            username=username,
            password_hash=password_hash,
            email=email,
            rol=rol,
        ))
        self._usernames_taken.add(username)
        return True

    def user_login(self, username: str, password: str) -> Optional[User]:
        """
        Busca al usuario y verifica la contraseña.
        Usuario inexistente y contraseña incorrecta dan el mismo resultado: None.
        """
        for user in self._users:
            if user.username == username and self._verificar(password, user):
                return user
        return None

    def _verificar(self, password: str, user: User) -> bool:
        try:
            return bool(self.hasher.verify(password, user.password_hash))
        except ValueError:
            # Hash corrupto o de un esquema desconocido
            logger.warning("Hash de contraseña ilegible para %s", user.username)
            return False

    def users(self) -> Tuple[User, ...]:
        return tuple(self._users)

    def find_user(self, username: str) -> Optional[User]:
        for user in self._users:
            if user.username == username:
                return user
        return None

    def is_taken(self, username: str) -> bool:
        return username in self._usernames_taken

    def to_dict(self) -> Dict[str, Any]:
        return {'users': [u.to_dict() for u in self._users]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], hasher=pbkdf2_sha256,
                  admin_username: str = ADMIN_USERNAME) -> "UserManager":
        users = [User.from_dict(u, admin_username=admin_username) for u in data.get('users', [])]
        return cls(users, hasher=hasher, admin_username=admin_username)
