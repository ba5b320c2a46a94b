# configuracion.py
import os
from pathlib import Path

try:
    # Cargar variables de entorno si existe .env (opcional)
    from dotenv import load_dotenv, find_dotenv
    load_dotenv(find_dotenv())
except Exception:
    pass


class Config:
    """
    Configuración global de la tienda.
    El estado completo se guarda en 'corona.json' en la raíz del proyecto
    o, con STATE_BACKEND=db, en la base de datos indicada.
    """

    BASE_DIR = Path(__file__).resolve().parent

    # -------------------- Persistencia del estado --------------------
    # 'archivo' (por defecto) o 'db'
    STATE_BACKEND = os.getenv("STATE_BACKEND", "archivo").strip().lower()
    STATE_FILE = os.getenv("STATE_FILE", str(BASE_DIR / "corona.json"))

    DB_PATH = BASE_DIR / "data" / "corona.sqlite"
    # Prefer explicit SQLALCHEMY_DATABASE_URI, then DATABASE_URL, else local SQLite
    SQLALCHEMY_DATABASE_URI = (
        os.getenv("SQLALCHEMY_DATABASE_URI")
        or os.getenv("DATABASE_URL")
        or f"sqlite:///{DB_PATH.as_posix()}"
    )

    # -------------------- Seguridad / Sesiones --------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "clave-secreta-para-prototipo")
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
    SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "False").lower() == "true"
    JSON_AS_ASCII = False

    # -------------------- Administración --------------------
    # Único usuario con rol de administrador (se asigna al registrarse)
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin").strip()

    # -------------------- Logging / CORS --------------------
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
