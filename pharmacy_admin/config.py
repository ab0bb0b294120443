import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value).resolve() if value else default


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = _env_path("DATA_DIR", BASE_DIR / "data")
    UPLOADS_DIR = _env_path("UPLOADS_DIR", BASE_DIR / "uploads")
    IMAGES_DIR = BASE_DIR / "image"
    ADMIN_DIR = BASE_DIR / "admin"
    FRONTEND_DIR = BASE_DIR

    # 50 MiB request bodies (inline base64 images from the admin panel)
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024
    STATIC_MAX_AGE = 7 * 24 * 60 * 60

    LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

    DEFAULT_SETTINGS = {
        "storeName": "صيدلية NEHAD ABDELRAMAN",
        "storeEmail": "info@pharmacy.com",
        "storePhone": "+20 100 000 0000",
        "storeAddress": "Cairo, Egypt",
        "storeHours": "9:00 AM - 10:00 PM",
        "currency": "جنيه",
        "primaryColor": "#ff750c",
        "secondaryColor": "#2C3E50",
    }


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False


class TestConfig(Config):
    TESTING = True
