"""Test sign-up and login endpoints."""

from conftest import auth_headers
from jobboard.core.exceptions import FRIENDLY_ERROR, DependencyError

SIGNUP = {"firstname": "Ada", "lastname": "Lovelace", "email": "ada@example.com"}


class TestSignUp:
    """Test POST /applicant/signup."""

    def test_signup_sends_temporary_password(self, test_client, fake_email_sender):
        response = test_client.post("/applicant/signup", json=SIGNUP)

        assert response.status_code == 200
        assert response.json() == ""
        assert len(fake_email_sender.sent) == 1
        recipient, password = fake_email_sender.sent[0]
        assert recipient == "ada@example.com"
        assert len(password) == 9

    def test_signup_missing_field(self, test_client, fake_email_sender):
        response = test_client.post(
            "/applicant/signup", json={"firstname": "Ada", "email": "ada@example.com"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required value"
        assert fake_email_sender.sent == []

    def test_signup_duplicate_email(self, test_client, fake_email_sender):
        test_client.post("/applicant/signup", json=SIGNUP)

        response = test_client.post("/applicant/signup", json=SIGNUP)

        assert response.status_code == 409
        assert len(fake_email_sender.sent) == 1

    def test_signup_mail_failure_keeps_no_account(self, test_client, fake_email_sender):
        fake_email_sender.fail_with = DependencyError("Mailgun", "down", status_code=503)

        response = test_client.post("/applicant/signup", json=SIGNUP)

        assert response.status_code == 500
        assert response.json()["detail"] == FRIENDLY_ERROR

        fake_email_sender.fail_with = None
        retry = test_client.post("/applicant/signup", json=SIGNUP)
        assert retry.status_code == 200

    def test_signup_malformed_body(self, test_client):
        response = test_client.post(
            "/applicant/signup",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == FRIENDLY_ERROR


class TestLogin:
    """Test POST /applicant/login."""

    def test_login_returns_token_and_step(self, test_client, fake_email_sender):
        test_client.post("/applicant/signup", json=SIGNUP)
        password = fake_email_sender.password_for("ada@example.com")

        response = test_client.post(
            "/applicant/login", json={"email": "ada@example.com", "password": password}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["registrationstep"] == "change-password"
        assert data["token"]

        me = test_client.get("/applicant/get", headers=auth_headers(data["token"]))
        assert me.status_code == 200
        assert me.json()["email"] == "ada@example.com"

    def test_login_wrong_password(self, test_client, fake_email_sender):
        test_client.post("/applicant/signup", json=SIGNUP)

        response = test_client.post(
            "/applicant/login", json={"email": "ada@example.com", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Login failed"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_login_unknown_email(self, test_client):
        response = test_client.post(
            "/applicant/login", json={"email": "ghost@example.com", "password": "x"}
        )

        assert response.status_code == 401

    def test_login_missing_password(self, test_client):
        response = test_client.post("/applicant/login", json={"email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Bad Request"


class TestApiKey:
    """Test the client API key on sign-up and login."""

    def test_signup_without_api_key(self, test_client, fake_email_sender):
        del test_client.headers["X-API-Key"]

        response = test_client.post("/applicant/signup", json=SIGNUP)

        assert response.status_code == 400
        assert response.json()["detail"] == FRIENDLY_ERROR
        assert fake_email_sender.sent == []

    def test_signup_with_wrong_api_key(self, test_client, fake_email_sender):
        response = test_client.post(
            "/applicant/signup", json=SIGNUP, headers={"X-API-Key": "not-the-key"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid API key"
        assert fake_email_sender.sent == []

    def test_login_without_api_key(self, test_client, signed_in):
        _, password = signed_in
        del test_client.headers["X-API-Key"]

        response = test_client.post(
            "/applicant/login", json={"email": "ada@example.com", "password": password}
        )

        assert response.status_code == 400
        assert "token" not in response.json()

    def test_login_with_wrong_api_key(self, test_client, signed_in):
        _, password = signed_in

        response = test_client.post(
            "/applicant/login",
            json={"email": "ada@example.com", "password": password},
            headers={"X-API-Key": "not-the-key"},
        )

        assert response.status_code == 401
        assert "token" not in response.json()

    def test_signed_in_routes_do_not_need_api_key(self, test_client, signed_in):
        headers, _ = signed_in
        del test_client.headers["X-API-Key"]

        response = test_client.get("/applicant/get", headers=headers)

        assert response.status_code == 200


class TestAuthorizationHeader:
    """Test bearer token handling on protected routes."""

    def test_missing_header(self, test_client):
        assert test_client.get("/applicant/get").status_code == 400

    def test_wrong_scheme(self, test_client, signed_in):
        headers, _ = signed_in
        token = headers["Authorization"].split(" ", 1)[1]

        response = test_client.get("/applicant/get", headers={"Authorization": f"Basic {token}"})

        assert response.status_code == 400

    def test_garbage_token(self, test_client):
        response = test_client.get("/applicant/get", headers=auth_headers("garbage!"))

        assert response.status_code == 400

    def test_token_for_deleted_database_row(self, test_client, signed_in):
        from conftest import run
        from jobboard.core.storage import Storage

        headers, _ = signed_in
        run(Storage.reset_models())

        response = test_client.get("/applicant/get", headers=headers)

        assert response.status_code == 404


class TestHealth:
    """Test service info endpoints."""

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "jobboard"}

    def test_api_info(self, test_client):
        assert test_client.get("/api").json()["message"] == "Job Board Applicant API"
