import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./blog.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 3000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENVIRONMENT = data.get("ENVIRONMENT", "development")

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    # Cookie max-age and token exp share this value
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 24 * 60 * 60))
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "jwt")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))

    UPLOAD_DIR = data.get("UPLOAD_DIR", os.path.join(ROOT_PATH, "uploads"))
    MAX_UPLOAD_BYTES = int(data.get("MAX_UPLOAD_BYTES", 5 * 1024 * 1024))

    RESET_PIN_IN_RESPONSE = bool(data.get("RESET_PIN_IN_RESPONSE", False))
