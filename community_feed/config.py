import os

from dotenv import load_dotenv


load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "db.sqlite"),
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _env_int("PORT", 4000)

    UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(BASE_DIR, "uploads"))
    MAX_FILES_PER_POST = _env_int("MAX_FILES_PER_POST", 6)

    FEED_DEFAULT_LIMIT = _env_int("FEED_DEFAULT_LIMIT", 8)
    FEED_MAX_LIMIT = _env_int("FEED_MAX_LIMIT", 50)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    _cors_origins_raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if _cors_origins_raw and _cors_origins_raw != "*":
        CORS_ALLOWED_ORIGINS = [
            item.strip() for item in _cors_origins_raw.split(",") if item.strip()
        ]
    else:
        CORS_ALLOWED_ORIGINS = "*"
