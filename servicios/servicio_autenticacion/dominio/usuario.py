# servicios/servicio_autenticacion/dominio/usuario.py

import enum
from dataclasses import dataclass, field
from typing import Any, Dict

from servicios.servicio_pedidos.dominio.carrito import Cart

# ==============================================================================
# ENTIDAD DE DOMINIO: USUARIO
# Define la estructura y las reglas de negocio de un usuario.
# Es independiente de la tecnologia (Flask, SQLAlchemy, etc.).
# ==============================================================================
class Rol(enum.Enum):
    CLIENTE = "customer"
    ADMIN = "admin"


@dataclass
class User:
    """
    Representa una cuenta registrada en la tienda.
    Cada usuario es dueño de exactamente un carrito.
    """
    username: str

    # Credenciales (la contraseña ya debe estar hasheada al llegar aqui)
    password_hash: str = field(repr=False)

    email: str

    # El rol se decide al registrarse y no cambia despues
    rol: Rol = Rol.CLIENTE

    cart: Cart = field(default_factory=Cart, repr=False)

    def is_admin(self) -> bool:
        return self.rol is Rol.ADMIN

    def to_dict(self) -> Dict[str, Any]:
        return {
            'username': self.username,
            'password_hash': self.password_hash,
            'email': self.email,
            'role': self.rol.value,
            'cart': self.cart.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], admin_username: str = "admin") -> "User":
        username = str(data['username'])
        # Snapshots sin rol: se deriva del nombre reservado
        rol_guardado = data.get('role')
        if rol_guardado:
            rol = Rol(rol_guardado)
        else:
            rol = Rol.ADMIN if username == admin_username else Rol.CLIENTE
        return cls(
            username=username,
            password_hash=str(data['password_hash']),
            email=str(data.get('email', '')),
            rol=rol,
            cart=Cart.from_dict(data.get('cart') or {}),
        )

    def __str__(self):
        return f"User({self.username}, Email: {self.email})"
