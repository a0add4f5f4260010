"""
Pytest configuration and fixtures
"""
import shutil

import bcrypt
import pytest
from fastapi.testclient import TestClient

from smartbizflow.core.deps import get_store
from smartbizflow.core.security import create_access_token
from smartbizflow.db.store import RecordStore
from smartbizflow.main import app


def fast_hash(password: str) -> str:
    """bcrypt at the minimum cost; verify_password accepts it like any bcrypt hash"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


@pytest.fixture(scope="function")
def store(tmp_path):
    """Empty store backed by a fresh data file for each test"""
    record_store = RecordStore(tmp_path / "data" / "hrms.json", seed_demo_data=False)
    record_store.initialize()
    yield record_store
    record_store.close()


@pytest.fixture(scope="session")
def seeded_template(tmp_path_factory):
    """Data file with the demo dataset, built once per session"""
    path = tmp_path_factory.mktemp("seed") / "hrms.json"
    template = RecordStore(path, seed_demo_data=True, password_hasher=fast_hash)
    template.initialize()
    template.close()
    return path


@pytest.fixture(scope="function")
def seeded_store(tmp_path, seeded_template):
    """Private copy of the demo dataset for each test"""
    path = tmp_path / "hrms.json"
    shutil.copy(seeded_template, path)
    record_store = RecordStore(path, seed_demo_data=False)
    record_store.initialize()
    yield record_store
    record_store.close()


@pytest.fixture(scope="function")
def client(seeded_store):
    """Test client fixture with record store override"""
    app.dependency_overrides[get_store] = lambda: seeded_store
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user_id: str, role: str) -> dict:
    token = create_access_token({"sub": user_id, "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    return auth_headers("admin-001", "ADMIN")


@pytest.fixture
def hr_headers():
    return auth_headers("hr-001", "HR_MANAGER")


@pytest.fixture
def employee_headers():
    """John Doe (emp-001), a plain EMPLOYEE"""
    return auth_headers("emp-001", "EMPLOYEE")


@pytest.fixture
def password_hasher():
    return fast_hash
