# tests/conftest.py
import os

# Point both services at private in-memory databases before anything
# imports shared.core.config.
os.environ["AUTH_DATABASE_URL"] = "sqlite://"
os.environ["PANTRY_DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from shared.core.database import (  # noqa: E402
    AuthBase, AuthSessionLocal, Base, PantrySessionLocal, auth_engine, pantry_engine)
from auth_service.app.main import app as auth_app  # noqa: E402
from pantry_service.app.main import app as pantry_app  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_databases():
    AuthBase.metadata.drop_all(bind=auth_engine)
    Base.metadata.drop_all(bind=pantry_engine)
    AuthBase.metadata.create_all(bind=auth_engine)
    Base.metadata.create_all(bind=pantry_engine)
    yield


@pytest.fixture
def auth_db():
    sess = AuthSessionLocal()
    try:
        yield sess
    finally:
        sess.close()


@pytest.fixture
def db():
    sess = PantrySessionLocal()
    try:
        yield sess
    finally:
        sess.close()


@pytest.fixture
def auth_client():
    with TestClient(auth_app) as c:
        yield c


@pytest.fixture
def client():
    with TestClient(pantry_app) as c:
        yield c
