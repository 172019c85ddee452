"""Integration tests for the auth and user-info endpoints via TestClient."""

from protean import current_domain

from marketplace.identity.user.user import User


def _sign_up(client, email="ana@example.com", password="Secret123"):
    return client.post(
        "/auth/signup",
        json={"email": email, "password": password, "confirmPassword": password},
    )


def _log_in(client, email="ana@example.com", password="Secret123"):
    return client.post("/auth/login", json={"email": email, "password": password})


class TestSignUpEndpoint:
    def test_sign_up_returns_201_with_token(self, client):
        response = _sign_up(client)
        assert response.status_code == 201
        body = response.json()
        assert body["token"]
        assert body["userId"]
        assert body["msg"] == "User registered successfully, please verify your email"

    def test_duplicate_sign_up_returns_400(self, client):
        _sign_up(client)
        assert _sign_up(client).status_code == 400

    def test_missing_password_returns_400(self, client):
        response = client.post("/auth/signup", json={"email": "ana@example.com"})
        assert response.status_code == 400


class TestVerifyAndLogin:
    def test_login_before_verification_returns_403(self, client):
        _sign_up(client)
        response = _log_in(client)
        assert response.status_code == 403
        assert response.json()["msg"] == "Please verify your email first"

    def test_verify_then_login(self, client):
        token = _sign_up(client).json()["token"]

        verified = client.get("/auth/verify-email", params={"token": token})
        assert verified.status_code == 200

        response = _log_in(client)
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "ana@example.com"
        assert response.json()["token"]

    def test_invalid_verification_token_returns_400(self, client):
        assert client.get("/auth/verify-email", params={"token": "garbage"}).status_code == 400

    def test_wrong_password_returns_400(self, client, register_user):
        register_user("ana@example.com")
        assert _log_in(client, password="Wrong1234").status_code == 400


class TestProtectedRoutes:
    def test_missing_token_returns_401(self, client):
        response = client.get("/auth/account")
        assert response.status_code == 401
        assert response.json()["msg"] == "No token, authorization denied"

    def test_bad_token_returns_401(self, client):
        response = client.get("/auth/account", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["msg"] == "Token is not valid"

    def test_login_token_opens_protected_routes(self, client, register_user):
        register_user("ana@example.com")
        token = _log_in(client).json()["token"]
        response = client.get("/auth/account", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_logout(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.post("/auth/logout", headers=auth_headers(user_id))
        assert response.status_code == 200
        assert response.json()["msg"] == "Logged out successfully"


class TestAccountEndpoints:
    def test_account_has_no_password_fields(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.get("/auth/account", headers=auth_headers(user_id))
        body = response.json()
        assert body["email"] == "ana@example.com"
        assert body["isEmailVerified"] is True
        assert "passwordHash" not in body
        assert "password" not in body

    def test_delete_account(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.delete("/auth/account", headers=auth_headers(user_id))
        assert response.status_code == 200
        assert current_domain.repository_for(User).get(user_id).is_deleted is True

    def test_deleted_account_returns_404(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        client.delete("/auth/account", headers=auth_headers(user_id))
        assert client.get("/auth/account", headers=auth_headers(user_id)).status_code == 404

    def test_change_password(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.put(
            "/auth/account/change-password",
            json={"currentPassword": "Secret123", "newPassword": "Newpass99"},
            headers=auth_headers(user_id),
        )
        assert response.status_code == 200
        assert _log_in(client, password="Newpass99").status_code == 200

    def test_change_password_with_wrong_current(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.put(
            "/auth/account/change-password",
            json={"currentPassword": "Wrong1234", "newPassword": "Newpass99"},
            headers=auth_headers(user_id),
        )
        assert response.status_code == 400


class TestUserInfoEndpoints:
    def test_update_and_read_user_info(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.put(
            "/userinfo",
            json={
                "firstName": "Ana",
                "lastName": "Cruz",
                "contactNumber": "09171234567",
                "address": "12 Mabini St",
                "role": "seller",
                "businessName": "Ana's Farm",
            },
            headers=auth_headers(user_id),
        )
        assert response.status_code == 200
        assert response.json()["redirectTo"] == "/account"

        info = client.get("/userinfo", headers=auth_headers(user_id)).json()
        assert info["firstName"] == "Ana"
        assert info["businessName"] == "Ana's Farm"

    def test_seller_without_business_name_returns_400(self, client, register_user, auth_headers):
        user_id = register_user("ana@example.com")
        response = client.put(
            "/userinfo",
            json={
                "firstName": "Ana",
                "lastName": "Cruz",
                "contactNumber": "09171234567",
                "address": "12 Mabini St",
                "role": "seller",
            },
            headers=auth_headers(user_id),
        )
        assert response.status_code == 400
