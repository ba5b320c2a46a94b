# servicios/servicio_pedidos/presentacion/rutas.py

import math

from flask import Blueprint, request, jsonify, g

# Importar las capas internas (Aplicación)
from servicios.servicio_pedidos.aplicacion.casos_uso.agregar_al_carrito import AgregarAlCarrito
from servicios.servicio_pedidos.aplicacion.casos_uso.realizar_checkout import RealizarCheckout
from servicios.servicio_pedidos.aplicacion.casos_uso.listar_ordenes import ListarOrdenes
from servicios.servicio_pedidos.aplicacion.casos_uso.pagar_orden import PagarOrden
from servicios.servicio_pedidos.dominio.excepciones import (
    CantidadInvalidaError,
    DireccionInvalidaError,
    OrdenCerradaError,
    OrdenNoEncontradaError,
    PagoInvalidoError,
    PagoRechazadoError,
)
from servicios.servicio_catalogo.dominio.excepciones import ProductoNoEncontradoError
from servicios.servicio_pedidos.presentacion.vistas import vista_carrito, vista_item, vista_orden
from decorators import login_required, tienda_actual

# Blueprints de Carrito y Ordenes
carrito_bp = Blueprint('carrito_bp', __name__, url_prefix='/api/v1/carrito')
ordenes_bp = Blueprint('ordenes_bp', __name__, url_prefix='/api/v1/ordenes')


def _numero(valor, tipo=float):
    """Convierte la entrada a número; None si no es válida."""
    if valor is None or isinstance(valor, bool):
        return None
    try:
        numero = tipo(valor)
    except (TypeError, ValueError):
        return None
    if isinstance(numero, float) and not math.isfinite(numero):
        return None
    return numero


def _texto_o_nada(valor) -> bool:
    """True si el campo falta o es texto."""
    return valor is None or isinstance(valor, str)


# ----------------- Carrito -----------------
@carrito_bp.route('', methods=['GET'])
@login_required
def carrito_ver():
    return jsonify(vista_carrito(g.usuario.cart)), 200


@carrito_bp.route('/add', methods=['POST'])
@login_required
def carrito_agregar():
    data = request.get_json(silent=True) or {}
    cantidad = _numero(data.get('quantity'))
    if cantidad is None:
        return jsonify({"ok": False, "error": "Cantidad inválida"}), 400

    if not _texto_o_nada(data.get('code')):
        return jsonify({"ok": False, "error": "Código inválido"}), 400

    indice = None
    if data.get('indice') is not None:
        indice = _numero(data.get('indice'), int)
        if indice is None:
            return jsonify({"ok": False, "error": "Índice inválido"}), 400

    try:
        item = AgregarAlCarrito(tienda_actual().catalog).ejecutar(
            g.usuario, cantidad, indice=indice, codigo=data.get('code')
        )
    except ProductoNoEncontradoError as e:
        return jsonify({"ok": False, "error": str(e)}), 404
    except CantidadInvalidaError as e:
        return jsonify({"ok": False, "error": str(e)}), 400

    return jsonify({"ok": True, "item": vista_item(item), "cart": vista_carrito(g.usuario.cart)}), 200


@carrito_bp.route('/remove', methods=['POST'])
@login_required
def carrito_quitar():
    data = request.get_json(silent=True) or {}
    code = data.get('code')
    if not code or not isinstance(code, str):
        return jsonify({"ok": False, "error": "Falta code"}), 400
    g.usuario.cart.remove_item(code)
    return jsonify({"ok": True, "cart": vista_carrito(g.usuario.cart)}), 200


# ----------------- Ordenes -----------------
@ordenes_bp.route('', methods=['GET'])
@login_required
def ordenes_listar():
    ordenes = ListarOrdenes(tienda_actual().order_manager).ejecutar(g.usuario)
    return jsonify({"ordenes": [vista_orden(o) for o in ordenes]}), 200


@ordenes_bp.route('/checkout', methods=['POST'])
@login_required
def ordenes_checkout():
    """Convierte el carrito del usuario en una orden abierta."""
    data = request.get_json(silent=True) or {}
    if not _texto_o_nada(data.get('delivery_address')):
        return jsonify({"error": "Dirección de entrega inválida."}), 400
    try:
        orden = RealizarCheckout(tienda_actual().order_manager).ejecutar(
            g.usuario, data.get('delivery_address')
        )
    except DireccionInvalidaError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"mensaje": "Orden creada.", "orden": vista_orden(orden)}), 201


@ordenes_bp.route('/<int:order_id>/pagar', methods=['POST'])
@login_required
def ordenes_pagar(order_id):
    """Paga (cierra) una orden propia con efectivo o tarjeta."""
    data = request.get_json(silent=True) or {}
    monto = _numero(data.get('amount'))
    if monto is None:
        return jsonify({"error": "Monto inválido."}), 400
    if not (_texto_o_nada(data.get('payment_method')) and _texto_o_nada(data.get('card_number'))):
        return jsonify({"error": "Método de pago o número de tarjeta inválido."}), 400

    try:
        resultado = PagarOrden(tienda_actual().order_manager).ejecutar(
            g.usuario,
            order_id,
            metodo=data.get('payment_method'),
            monto=monto,
            numero_tarjeta=data.get('card_number'),
        )
    except OrdenNoEncontradaError as e:
        return jsonify({"error": str(e)}), 404
    except OrdenCerradaError as e:
        return jsonify({"error": str(e)}), 409
    except PagoInvalidoError as e:
        return jsonify({"error": str(e)}), 400
    except PagoRechazadoError as e:
        return jsonify({"error": str(e)}), 402

    return jsonify({
        "mensaje": "Orden pagada exitosamente.",
        "orden": vista_orden(resultado.orden),
        "cambio": round(resultado.cambio, 2),
    }), 200
