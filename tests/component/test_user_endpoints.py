"""Component tests for the user endpoints."""

from django.conf import settings

from core.models import User
from tests.base import BaseComponentTest
from tests.factories import DEFAULT_PASSWORD, make_user


def _registration(**overrides):
    data = {
        "username": "jane",
        "email": "jane@example.com",
        "password": DEFAULT_PASSWORD,
    }
    data.update(overrides)
    return data


class TestRegistrationAndLogin(BaseComponentTest):
    """Test cases for register, login and logout."""

    def test_register_sets_cookie(self):
        """Test that registration returns the profile and a session cookie."""
        response = self.post_json("/api/users", _registration())

        self.assertEqual(response.status_code, 201)
        self.assertEqual(
            set(response.json()), {"id", "username", "email", "isAdmin"}
        )
        cookie = response.cookies[settings.JWT_COOKIE_NAME]
        self.assertTrue(cookie.value)
        self.assertTrue(cookie["httponly"])

    def test_registration_cookie_authenticates(self):
        """Test that the issued cookie opens the profile endpoint."""
        self.post_json("/api/users", _registration())

        response = self.client.get("/api/users/profile")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "jane")

    def test_register_duplicate_email(self):
        """Test that a taken email is a conflict."""
        make_user(email="jane@example.com")

        response = self.post_json("/api/users", _registration(username="jane2"))

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["message"], "User already exists")

    def test_register_weak_password(self):
        """Test that weak passwords are rejected with field errors."""
        response = self.post_json("/api/users", _registration(password="password"))

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertEqual(data["message"], "Invalid request parameters")
        self.assertEqual(data["errors"][0]["loc"], ["password"])

    def test_register_from_form_body(self):
        """Test that form-encoded registration is accepted."""
        response = self.client.post(
            "/api/users",
            _registration(username="formuser", email="form@example.com"),
        )

        self.assertEqual(response.status_code, 201)

    def test_login(self):
        """Test that correct credentials start a session."""
        user = make_user()

        response = self.post_json(
            "/api/users/auth", {"email": user.email, "password": DEFAULT_PASSWORD}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["id"], user.pk)
        self.assertIn(settings.JWT_COOKIE_NAME, response.cookies)

    def test_login_wrong_password(self):
        """Test that bad credentials are 401."""
        user = make_user()

        response = self.post_json(
            "/api/users/auth", {"email": user.email, "password": "Wr0ng!Password"}
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Invalid email or password")

    def test_login_missing_fields(self):
        """Test that an empty login body is a 400."""
        response = self.post_json("/api/users/auth", {})

        self.assertEqual(response.status_code, 400)

    def test_logout_clears_cookie(self):
        """Test that logout expires the session cookie."""
        self.login_as_new_user()

        response = self.client.post("/api/users/logout")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Logged out successfully"})
        self.assertEqual(response.cookies[settings.JWT_COOKIE_NAME].value, "")
        self.assertEqual(self.client.get("/api/users/profile").status_code, 401)


class TestProfile(BaseComponentTest):
    """Test cases for the caller's profile."""

    def test_profile_requires_session(self):
        """Test that anonymous callers get 401."""
        self.assertEqual(self.client.get("/api/users/profile").status_code, 401)

    def test_invalid_cookie_is_401(self):
        """Test that a garbage cookie is treated as anonymous."""
        self.client.cookies[settings.JWT_COOKIE_NAME] = "not-a-jwt"

        self.assertEqual(self.client.get("/api/users/profile").status_code, 401)

    def test_bearer_header(self):
        """Test that API clients may send the token as a Bearer header."""
        from core.auth import issue_token  # noqa: PLC0415

        user = make_user()

        response = self.client.get(
            "/api/users/profile", HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}"
        )

        self.assertEqual(response.status_code, 200)

    def test_update_profile(self):
        """Test a partial profile update."""
        user = self.login_as_new_user()

        response = self.put_json("/api/users/profile", {"username": "renamed"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "renamed")
        self.assertEqual(response.json()["email"], user.email)

    def test_update_profile_email_conflict(self):
        """Test that taking another account's email is a conflict."""
        other = make_user()
        self.login_as_new_user()

        response = self.put_json("/api/users/profile", {"email": other.email})

        self.assertEqual(response.status_code, 409)


class TestUserAdministration(BaseComponentTest):
    """Test cases for the admin user endpoints."""

    def test_list_requires_admin(self):
        """Test 401 for anonymous and 403 for regular users."""
        self.assertEqual(self.client.get("/api/users").status_code, 401)

        self.login_as_new_user()
        response = self.client.get("/api/users")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["detail"], "Not authorized as an admin.")

    def test_admin_lists_users(self):
        """Test that admins see every account without password hashes."""
        make_user()
        self.login_as_new_user(admin=True)

        response = self.client.get("/api/users")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 2)
        self.assertNotIn("passwordHash", response.json()[0])

    def test_admin_gets_and_updates_user(self):
        """Test reading and promoting a user."""
        user = make_user()
        self.login_as_new_user(admin=True)

        self.assertEqual(self.client.get(f"/api/users/{user.pk}").status_code, 200)
        response = self.put_json(f"/api/users/{user.pk}", {"isAdmin": True})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["isAdmin"])

    def test_admin_deletes_user(self):
        """Test deleting a regular user."""
        user = make_user()
        self.login_as_new_user(admin=True)

        response = self.client.delete(f"/api/users/{user.pk}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "User removed"})
        self.assertFalse(User.objects.filter(pk=user.pk).exists())

    def test_admin_cannot_delete_admin(self):
        """Test that administrators are protected."""
        other_admin = make_user(admin=True)
        self.login_as_new_user(admin=True)

        response = self.client.delete(f"/api/users/{other_admin.pk}")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Cannot delete admin user")

    def test_missing_user_is_404(self):
        """Test the not found response."""
        self.login_as_new_user(admin=True)

        response = self.client.get("/api/users/424242")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "User with ID 424242 not found")
