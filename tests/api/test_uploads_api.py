"""
API tests for image upload endpoints and service endpoints.
"""

from fastapi.testclient import TestClient

from clubdesk.providers import StubObjectStorage


class TestUploadsAPI:
    def test_presigned_post(self, client: TestClient, admin_headers, api_settings):
        response = client.post(
            "/uploads/images",
            json={"filename": "cabin.jpg", "content_type": "image/jpeg", "size": 2048},
            headers=admin_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["url"] == "https://uploads.test/test-bucket"
        assert data["key"].startswith("posts/")
        storage = StubObjectStorage(api_settings.upload_endpoint, api_settings.upload_signing_secret)
        assert storage.verify(data["fields"])

    def test_rejects_non_image(self, client: TestClient, admin_headers):
        response = client.post(
            "/uploads/images",
            json={"filename": "doc.pdf", "content_type": "application/pdf"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_requires_admin(self, client: TestClient):
        response = client.post(
            "/uploads/images",
            json={"filename": "a.png", "content_type": "image/png"},
        )

        assert response.status_code == 401


class TestServiceEndpoints:
    def test_health(self, client: TestClient):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root(self, client: TestClient):
        data = client.get("/").json()

        assert data["docs"] == "/docs"
