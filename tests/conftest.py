from __future__ import annotations

import pytest

from app import create_app
from config import TestingConfig
from tests.fakes import InMemoryDatabase


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(db, upload_dir):
    class _Config(TestingConfig):
        UPLOAD_FOLDER = str(upload_dir)

    return create_app(_Config, db=db)


@pytest.fixture
def client(app):
    return app.test_client()
