import pytest
from fastapi.testclient import TestClient

from consultorio.main import app
from consultorio.core.storage import JsonStore, get_store

# Test data
MEDICO = {"email": "medico@example.com", "password": "secret123"}

TURNO = {
    "fecha": "2024-01-01",
    "hora": "10:00",
    "nombre": "Ana Pérez",
    "email": "ana@example.com",
    "telefono": "1155550000",
    "motivo": "Control",
}

@pytest.fixture
def store(tmp_path):
    test_store = JsonStore(str(tmp_path))
    test_store.ensure_files()
    return test_store

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def auth_headers(client):
    client.post("/api/register-medico", json=MEDICO)
    response = client.post("/api/login", json=MEDICO)
    return {"Authorization": f"Bearer {response.json()['token']}"}
