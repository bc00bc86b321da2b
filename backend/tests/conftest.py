import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure `backend/` and the repo root are on sys.path so `import loyalty...` works
BACKEND_DIR = Path(__file__).resolve().parents[1]
REPO_ROOT = BACKEND_DIR.parent
for path in (str(BACKEND_DIR), str(REPO_ROOT)):
    if path not in sys.path:
        sys.path.insert(0, path)

from loyalty.config import settings  # noqa: E402
from loyalty.db.db import Base  # noqa: E402
from loyalty.dependencies.db import get_db  # noqa: E402
from loyalty.dependencies.security import rate_limiter  # noqa: E402
from loyalty.main import app  # noqa: E402
import loyalty.models  # noqa: F401,E402


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    with session_factory() as db:
        yield db


@pytest.fixture()
def auth_headers():
    return {settings.API_KEY_HEADER: settings.API_KEY}


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    rate_limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()
    rate_limiter.reset()
