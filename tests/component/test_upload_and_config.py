"""Component tests for image upload and the PayPal config endpoint."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from tests.base import BaseComponentTest

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestUploadEndpoint(BaseComponentTest):
    """Test cases for /api/upload."""

    def test_requires_admin(self):
        """Test that regular users cannot upload."""
        self.login_as_new_user()
        upload = SimpleUploadedFile("a.png", PNG_BYTES, content_type="image/png")

        response = self.client.post("/api/upload", {"image": upload})

        self.assertEqual(response.status_code, 403)

    def test_admin_uploads_image(self):
        """Test a successful upload."""
        self.login_as_new_user(admin=True)
        upload = SimpleUploadedFile("a.png", PNG_BYTES, content_type="image/png")

        response = self.client.post("/api/upload", {"image": upload})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["message"], "Image uploaded successfully")
        self.assertTrue(data["image"].startswith("/uploads/image-"))

    def test_rejects_non_images(self):
        """Test that other file types are refused."""
        self.login_as_new_user(admin=True)
        upload = SimpleUploadedFile("a.pdf", b"%PDF", content_type="application/pdf")

        response = self.client.post("/api/upload", {"image": upload})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "Images only")

    def test_missing_file(self):
        """Test that the image field is required."""
        self.login_as_new_user(admin=True)

        response = self.client.post("/api/upload", {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "No image file provided")


@pytest.mark.django_db
def test_paypal_config_is_public(api_client):
    """Test that the checkout page can read the client id anonymously."""
    response = api_client.get("/api/config/paypal")

    assert response.status_code == 200
    assert response.json() == {"clientId": "test-paypal-client-id"}


@pytest.mark.django_db
def test_authenticated_client_sees_profile(authenticated_client, customer):
    """Test that the shared fixture produces a working session."""
    response = authenticated_client.get("/api/users/profile")

    assert response.status_code == 200
    assert response.json()["id"] == customer.pk
