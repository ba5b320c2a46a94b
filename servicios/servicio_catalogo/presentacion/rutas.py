# servicios/servicio_catalogo/presentacion/rutas.py
from flask import Blueprint, request, jsonify

from servicios.servicio_catalogo.aplicacion.casos_uso.administrar_catalogo import AdministrarCatalogo
from servicios.servicio_catalogo.dominio.excepciones import DatosDeProductoInvalidosError, ProductoDuplicadoError
from decorators import admin_required, tienda_actual

catalogo_bp = Blueprint('catalogo', __name__, url_prefix='/api/v1/catalogo')


def vista_producto(indice: int, producto) -> dict:
    return {
        'indice': indice,
        'code': producto.code,
        'name': producto.name,
        'unit_price': round(producto.unit_price, 2),
    }


# --------------------------------------------------------------------
# ENDPOINT: LISTAR PRODUCTOS (índice base 1 para agregar al carrito)
# --------------------------------------------------------------------
@catalogo_bp.route('/productos', methods=['GET'])
def listar_productos():
    productos = tienda_actual().catalog.products()
    return jsonify({
        'productos': [vista_producto(i, p) for i, p in enumerate(productos, start=1)],
        'total': len(productos),
    }), 200


# --------------------------------------------------------------------
# ENDPOINTS DE ADMINISTRACIÓN
# --------------------------------------------------------------------
@catalogo_bp.route('/productos', methods=['POST'])
@admin_required
def agregar_producto():
    data = request.get_json(silent=True) or {}
    if not all(isinstance(data.get(campo), str) for campo in ('code', 'name')):
        return jsonify({"error": "Código y nombre deben ser texto."}), 400

    try:
        precio = float(data.get('unit_price'))
    except (TypeError, ValueError):
        return jsonify({"error": "Precio unitario inválido."}), 400

    try:
        producto = AdministrarCatalogo(tienda_actual().catalog).agregar(
            codigo=data.get('code'), nombre=data.get('name'), precio=precio
        )
    except DatosDeProductoInvalidosError as e:
        return jsonify({"error": str(e)}), 400
    except ProductoDuplicadoError as e:
        return jsonify({"error": str(e)}), 409

    indice = len(tienda_actual().catalog)
    return jsonify({"ok": True, "producto": vista_producto(indice, producto)}), 201


@catalogo_bp.route('/productos/<code>', methods=['DELETE'])
@admin_required
def eliminar_producto(code):
    AdministrarCatalogo(tienda_actual().catalog).eliminar(code)
    return jsonify({"ok": True}), 200
