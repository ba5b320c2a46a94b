# servicios/tienda/presentacion/rutas.py

from flask import Blueprint, current_app, jsonify

from decorators import tienda_actual

EXTENSION_REPOSITORIO = "repositorio_estado"

estado_bp = Blueprint('estado_bp', __name__, url_prefix='/api/v1/estado')


def guardar_estado() -> bool:
    """Guarda la tienda de la app actual en su repositorio de estado."""
    repositorio = current_app.extensions[EXTENSION_REPOSITORIO]
    return tienda_actual().save(repositorio)


@estado_bp.route('/guardar', methods=['POST'])
def guardar():
    """Guardado explícito del estado completo."""
    if not guardar_estado():
        return jsonify({"ok": False, "error": "No se pudo guardar."}), 500
    return jsonify({"ok": True}), 200
