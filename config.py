# config.py
"""EAN-13 Generator - Flask Application configuration."""

# Python imports
from os import environ, path

# Third-party imports
from dotenv import load_dotenv

# Local imports

# Load environment variables from .env file
basedir = path.abspath(path.dirname(__file__))
load_dotenv(path.join(basedir, ".env"))


def _env_flag(name, default):
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Base config."""

    SECRET_KEY = environ.get("SECRET_KEY")

    # Default location for the application log during local dev.
    EAN13_GEN_FOLDER = environ.get("EAN13_GEN_FOLDER") or path.join(basedir, "ean13_data")
    EAN13_GEN_LOG_FILE = (
        environ.get("EAN13_GEN_LOG_FILE")
        or path.join(EAN13_GEN_FOLDER, "ean13_gen.log")
    )

    APP_SERVER_OS = environ.get("APP_SERVER_OS") or "Linux"

    # Reattach a "-label" suffix after the weight has been written into the body.
    KEEP_LABEL_ON_WEIGHT = _env_flag("KEEP_LABEL_ON_WEIGHT", True)


class ProdConfig(Config):
    """Production System Configuration"""

    FLASK_ENV = "production"
    DEBUG = False
    TESTING = False
    LOG_LINES_TO_SHOW = "164"


class DevConfig(Config):
    """Development System Configuration"""

    FLASK_ENV = "development"
    DEBUG = True
    TESTING = True
    LOG_LINES_TO_SHOW = "164"
