import os

from dotenv import load_dotenv

basedir = os.path.abspath(os.path.dirname(__file__))

load_dotenv(os.path.join(basedir, ".env"))


def _env_flag(name):
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _env_port(name, default):
    value = os.environ.get(name, "").strip()
    if not value.isnumeric() or int(value) <= 0:
        return default
    return int(value)


def _database_url(default):
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return default
    # SQLAlchemy only knows the "postgresql" dialect name
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def _origins(value):
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    if not origins or "*" in origins:
        return "*"
    return origins


DEBUG = _env_flag("FLASK_DEBUG")
HOST = os.environ.get("HOST", "").strip() or "0.0.0.0"
PORT = _env_port("PORT", 3000)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO"

DB_PATH = os.path.join(basedir, "database.db")
SQLALCHEMY_DATABASE_URI = _database_url(f"sqlite:///{DB_PATH}")
SQLALCHEMY_TRACK_MODIFICATIONS = False

CORS_ORIGINS = _origins(os.environ.get("CORS_ORIGINS", "*"))

# uploads arrive as multipart from API clients, not rendered forms
WTF_CSRF_ENABLED = False

IMAGE_MIMETYPE = "image/jpeg"
