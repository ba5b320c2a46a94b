from functools import wraps
from typing import Optional

from flask import current_app, g, jsonify, session

from servicios.servicio_autenticacion.dominio.usuario import User
from servicios.tienda.dominio.aplicacion import Application

EXTENSION_TIENDA = "tienda"


def tienda_actual() -> Application:
    """Aplicación (estado de la tienda) creada en crear_app()."""
    return current_app.extensions[EXTENSION_TIENDA]


def usuario_actual() -> Optional[User]:
    username = session.get("username")
    if not username:
        return None
    return tienda_actual().user_manager.find_user(username)


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        usuario = usuario_actual()
        if usuario is None:
            return jsonify({"error": "Debes iniciar sesión."}), 401
        g.usuario = usuario
        return fn(*args, **kwargs)
    return wrapper


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        usuario = usuario_actual()
        if usuario is None:
            return jsonify({"error": "Debes iniciar sesión."}), 401
        if not usuario.is_admin():
            return jsonify({"error": "No autorizado"}), 403
        g.usuario = usuario
        return fn(*args, **kwargs)
    return wrapper
