from consultorio.core.security import verify_token

from tests.conftest import MEDICO


class TestRegistration:

    def test_register_medico(self, client, store):
        """Test practitioner registration."""
        response = client.post("/api/register-medico", json=MEDICO)
        assert response.status_code == 201
        assert "message" in response.json()

        practitioner = store.load_practitioner()
        assert practitioner.email == MEDICO["email"]
        assert practitioner.password_hash != MEDICO["password"]

    def test_register_twice(self, client, store):
        """Test that only one practitioner can ever be registered."""
        client.post("/api/register-medico", json=MEDICO)

        response = client.post(
            "/api/register-medico",
            json={"email": "otro@example.com", "password": "otraclave"}
        )
        assert response.status_code == 400
        assert "error" in response.json()
        assert store.load_practitioner().email == MEDICO["email"]

    def test_register_missing_fields(self, client, store):
        """Test registration without password."""
        response = client.post("/api/register-medico", json={"email": MEDICO["email"]})
        assert response.status_code == 400
        assert store.load_practitioner() is None

    def test_register_empty_password(self, client, store):
        response = client.post(
            "/api/register-medico",
            json={"email": MEDICO["email"], "password": ""}
        )
        assert response.status_code == 400


class TestLogin:

    def test_login_without_practitioner(self, client):
        """Test login before anyone registered."""
        response = client.post("/api/login", json=MEDICO)
        assert response.status_code == 400

    def test_login_success(self, client):
        """Test successful login."""
        client.post("/api/register-medico", json=MEDICO)

        response = client.post("/api/login", json=MEDICO)
        assert response.status_code == 200

        token = response.json()["token"]
        payload = verify_token(token)
        assert payload is not None
        assert payload.email == MEDICO["email"]

    def test_wrong_password_matches_wrong_email(self, client):
        """Wrong password and unknown email are indistinguishable."""
        client.post("/api/register-medico", json=MEDICO)

        wrong_password = client.post(
            "/api/login",
            json={"email": MEDICO["email"], "password": "wrongpassword"}
        )
        wrong_email = client.post(
            "/api/login",
            json={"email": "nadie@example.com", "password": MEDICO["password"]}
        )

        assert wrong_password.status_code == 401
        assert wrong_email.status_code == 401
        assert wrong_password.json() == wrong_email.json()

    def test_login_missing_password(self, client):
        client.post("/api/register-medico", json=MEDICO)

        response = client.post("/api/login", json={"email": MEDICO["email"]})
        assert response.status_code == 401


class TestBearerGate:

    def test_missing_header(self, client):
        response = client.get("/api/turnos")
        assert response.status_code == 401
        assert "error" in response.json()

    def test_invalid_token(self, client):
        """Test protected route with invalid token."""
        headers = {"Authorization": "Bearer invalid_token"}

        response = client.get("/api/turnos", headers=headers)
        assert response.status_code == 401

    def test_header_without_token(self, client):
        response = client.get("/api/turnos", headers={"Authorization": "Bearer"})
        assert response.status_code == 401

    def test_wrong_scheme(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ")[1]

        response = client.get("/api/turnos", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    def test_valid_token(self, client, auth_headers):
        response = client.get("/api/turnos", headers=auth_headers)
        assert response.status_code == 200
