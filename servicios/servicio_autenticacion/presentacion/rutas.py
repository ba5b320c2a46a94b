# servicios/servicio_autenticacion/presentacion/rutas.py

import logging

from flask import Blueprint, request, jsonify, session

# Importamos las clases de Caso de Uso
from servicios.servicio_autenticacion.aplicacion.casos_uso.registrar_usuario import RegistrarUsuario
from servicios.servicio_autenticacion.aplicacion.casos_uso.iniciar_sesion import IniciarSesion
from servicios.servicio_autenticacion.dominio.excepciones import CredencialesInvalidasError, UsuarioDuplicadoError
from decorators import tienda_actual, usuario_actual

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
# INICIALIZACION Y BLUEPRINT
# ----------------------------------------------------------------------

# Creamos el Blueprint para agrupar las rutas de autenticacion
auth_bp = Blueprint('auth_bp', __name__, url_prefix='/api/v1/auth')


def _vista_usuario(usuario) -> dict:
    return {
        "username": usuario.username,
        "email": usuario.email,
        "is_admin": usuario.is_admin(),
    }


# ----------------------------------------------------------------------
# RUTAS DE AUTENTICACION
# ----------------------------------------------------------------------

@auth_bp.route('/register', methods=['POST'])
def register():
    """Ruta para registrar un nuevo usuario."""
    data = request.get_json(silent=True) or {}

    campos = [data.get('username'), data.get('password'), data.get('email')]
    if not all(isinstance(c, str) and c.strip() for c in campos):
        return jsonify({"error": "Faltan campos requeridos (username, password, email)."}), 400
    username, password, email = campos[0].strip(), campos[1], campos[2].strip()

    try:
        usuario = RegistrarUsuario(tienda_actual().user_manager).ejecutar(
            username=username, password=password, email=email
        )
    except UsuarioDuplicadoError as e:
        return jsonify({"error": str(e)}), 409  # Conflicto

    return jsonify({
        "mensaje": "Usuario registrado exitosamente.",
        "user": _vista_usuario(usuario),
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Ruta para iniciar sesion; guarda el usuario en la sesion de Flask."""
    data = request.get_json(silent=True) or {}

    username = data.get('username')
    password = data.get('password')

    if not (isinstance(username, str) and isinstance(password, str)):
        return jsonify({"error": "Usuario y contraseña deben ser texto."}), 400
    username = username.strip()
    if not all([username, password]):
        return jsonify({"error": "Faltan campos requeridos (username, password)."}), 400

    try:
        usuario = IniciarSesion(tienda_actual().user_manager).ejecutar(
            username=username, password=password
        )
    except CredencialesInvalidasError as e:
        logger.info("Inicio de sesion rechazado para %s", username)
        return jsonify({"error": str(e)}), 401  # No autorizado

    session['username'] = usuario.username

    return jsonify({
        "mensaje": "Inicio de sesion exitoso.",
        "user": _vista_usuario(usuario),
    }), 200


@auth_bp.route('/me', methods=['GET'])
def me():
    """Retorna el estado de autenticación y datos básicos del usuario."""
    usuario = usuario_actual()
    if usuario is None:
        return jsonify({"authenticated": False}), 200
    return jsonify({"authenticated": True, "user": _vista_usuario(usuario)}), 200


@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.pop('username', None)
    return jsonify({"ok": True}), 200
