# app.py
from flask import Flask, jsonify, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
import atexit
import logging

from configuracion import Config
from decorators import EXTENSION_TIENDA
from servicios.servicio_catalogo.presentacion.rutas import catalogo_bp
from servicios.servicio_autenticacion.presentacion.rutas import auth_bp
from servicios.servicio_pedidos.presentacion.rutas import carrito_bp, ordenes_bp
from servicios.tienda.presentacion.rutas import EXTENSION_REPOSITORIO, estado_bp, guardar_estado
from servicios.tienda.dominio.aplicacion import Application
from servicios.tienda.infraestructura.persistencia.archivo_repositorio_estado import ArchivoRepositorioEstado
from servicios.tienda.infraestructura.persistencia.sql_repositorio_estado import SQLRepositorioEstado


def crear_repositorio_estado(config=Config):
    """Elige dónde se guarda el estado según STATE_BACKEND."""
    if getattr(config, "STATE_BACKEND", "archivo") == "db":
        return SQLRepositorioEstado(config.SQLALCHEMY_DATABASE_URI)
    return ArchivoRepositorioEstado(config.STATE_FILE)


def _configurar_logging(app: Flask, nivel: str):
    if not app.logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        app.logger.addHandler(handler)
    app.logger.setLevel(getattr(logging, nivel, logging.INFO))

    # Los loggers de los servicios comparten el handler de la app
    servicios_logger = logging.getLogger("servicios")
    if not servicios_logger.handlers:
        for handler in app.logger.handlers:
            servicios_logger.addHandler(handler)
    servicios_logger.setLevel(getattr(logging, nivel, logging.INFO))


def crear_app(config=Config, repositorio=None, tienda=None, hasher=None):
    """
    Crea la app Flask. La tienda se carga una sola vez aquí (desde el
    repositorio de estado) y se comparte con todas las rutas.
    """
    app = Flask(__name__)
    app.config.from_object(config)
    app.config.setdefault("SECRET_KEY", "cambia-esto-por-uno-seguro")

    # Habilitar CORS para la API
    cors_env = getattr(config, "CORS_ORIGINS", "*")
    allowed = [o.strip() for o in cors_env.split(",") if o.strip()] if cors_env and cors_env != "*" else "*"
    CORS(app, resources={r"/api/*": {"origins": allowed}}, supports_credentials=True)

    _configurar_logging(app, getattr(config, "LOG_LEVEL", "INFO"))

    if repositorio is None:
        repositorio = crear_repositorio_estado(config)
    if tienda is None:
        extra = {"hasher": hasher} if hasher is not None else {}
        tienda = Application.load(repositorio, admin_username=config.ADMIN_USERNAME, **extra)

    app.extensions[EXTENSION_TIENDA] = tienda
    app.extensions[EXTENSION_REPOSITORIO] = repositorio

    # Blueprints
    app.register_blueprint(auth_bp)      # /api/v1/auth/*
    app.register_blueprint(catalogo_bp)  # /api/v1/catalogo/*
    app.register_blueprint(carrito_bp)   # /api/v1/carrito/*
    app.register_blueprint(ordenes_bp)   # /api/v1/ordenes/*
    app.register_blueprint(estado_bp)    # /api/v1/estado/*

    @app.errorhandler(404)
    def pagina_no_encontrada(_error):
        return jsonify({"error": "Ruta no encontrada"}), 404

    @app.errorhandler(405)
    def metodo_no_permitido(_error):
        return jsonify({"error": "Método no permitido"}), 405

    @app.errorhandler(Exception)
    def _unhandled(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        current_app.logger.exception("Unhandled")
        return {"ok": False, "error": "server_error"}, 500

    return app

create_app = crear_app

if __name__ == "__main__":
    app = crear_app()

    def _guardar_al_salir():
        with app.app_context():
            if not guardar_estado():
                app.logger.warning("No se pudo guardar el estado al salir.")

    atexit.register(_guardar_al_salir)
    print("Iniciando servidor Flask. Accede a http://127.0.0.1:5000/")
    # Un solo hilo: el estado se modifica en memoria sin bloqueos
    app.run(debug=False, threaded=False)
