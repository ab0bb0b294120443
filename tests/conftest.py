"""
Shared test fixtures and configuration for Pharmacy Admin tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from pharmacy_admin import create_app
from pharmacy_admin.config import TestConfig
from pharmacy_admin.storage.json_store import JsonStore


@pytest.fixture
def temp_data_dir(tmp_path: Path) -> Path:
    """Create a temporary data directory for JsonStore tests."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    return data_dir


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Project root stand-in holding the storefront, admin and image folders."""
    site = tmp_path / "site"
    site.mkdir()
    return site


@pytest.fixture
def app(temp_data_dir: Path, site_dir: Path, tmp_path: Path) -> Flask:
    """Create a test Flask application bound to temporary directories."""

    class _Config(TestConfig):
        DATA_DIR = temp_data_dir
        UPLOADS_DIR = tmp_path / "uploads"
        IMAGES_DIR = site_dir / "image"
        ADMIN_DIR = site_dir / "admin"
        FRONTEND_DIR = site_dir

    app = create_app(_Config)
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def json_store(temp_data_dir: Path) -> JsonStore:
    """Create a JsonStore instance with temporary directory."""
    return JsonStore(temp_data_dir)


@pytest.fixture
def clock(mocker):
    """Deterministic, strictly increasing record timestamps."""
    stamps = (f"2024-01-01T00:00:{s:02d}.000Z" for s in range(60))
    return mocker.patch("pharmacy_admin.storage.repository.utcnow", side_effect=lambda: next(stamps))


@pytest.fixture
def write_collection(temp_data_dir: Path):
    """Write a collection file the way the store does."""

    def _write(name: str, value) -> Path:
        path = temp_data_dir / f"{name}.json"
        path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def read_collection(temp_data_dir: Path):
    """Read a collection file straight from disk."""

    def _read(name: str):
        with open(temp_data_dir / f"{name}.json", encoding="utf-8") as f:
            return json.load(f)

    return _read
