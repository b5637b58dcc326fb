import string

from fastapi.testclient import TestClient

from main import app
from shortlink_app.dependencies import get_alias_generator
from shortlink_app.errors import StorageError
from shortlink_app.services.alias_generator import AliasGenerator

ALPHANUMERIC = set(string.ascii_letters + string.digits)


class ConstantGenerator(AliasGenerator):
    def generate(self, length: int) -> str:
        return "same"


class BrokenStore:
    """Stand-in store whose every call fails"""

    def init(self):
        pass

    def close(self):
        pass

    def save(self, alias, url):
        raise StorageError("disk on fire")

    def get_url(self, alias):
        raise StorageError("disk on fire")


class CrashingStore(BrokenStore):
    """Stand-in store raising something no handler expects"""

    def get_url(self, alias):
        raise RuntimeError("unexpected")


class TestSaveEndpoint:
    """Test POST /url"""

    def test_save_generated_alias(self, client: TestClient):
        response = client.post("/url", json={"url": "https://example.com"})
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "OK"
        assert len(data["alias"]) == 6
        assert set(data["alias"]) <= ALPHANUMERIC
        assert "error" not in data

    def test_save_trailing_slash(self, client: TestClient):
        response = client.post("/url/", json={"url": "https://example.com"})
        assert response.status_code == 200
        assert response.json()["status"] == "OK"

    def test_save_custom_alias(self, client: TestClient):
        response = client.post("/url", json={"url": "https://example.com", "alias": "shop"})

        assert response.status_code == 200
        assert response.json() == {"status": "OK", "alias": "shop"}

    def test_custom_alias_taken(self, client: TestClient):
        client.post("/url", json={"url": "https://example.com", "alias": "shop"})

        response = client.post("/url", json={"url": "https://other.com", "alias": "shop"})
        assert response.status_code == 200
        assert response.json() == {"status": "Error", "error": "url already exists"}

        # Original mapping is untouched
        redirect = client.get("/shop", follow_redirects=False)
        assert redirect.status_code == 302
        assert redirect.headers["location"] == "https://example.com"

    def test_missing_url(self, client: TestClient):
        response = client.post("/url", json={})

        assert response.status_code == 400
        assert response.json() == {"status": "Error", "error": "field url is a required field"}

    def test_empty_url(self, client: TestClient):
        response = client.post("/url", json={"url": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "field url is a required field"

    def test_invalid_url(self, client: TestClient):
        response = client.post("/url", json={"url": "not-a-url"})

        assert response.status_code == 400
        assert response.json() == {"status": "Error", "error": "field url is not a valid URL"}

    def test_invalid_alias(self, client: TestClient):
        response = client.post("/url", json={"url": "https://example.com", "alias": "no/slash"})

        assert response.status_code == 400
        assert response.json()["error"] == "field alias is not a valid alias"

    def test_undecodable_body(self, client: TestClient):
        response = client.post(
            "/url", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"status": "Error", "error": "failed to decode request"}

    def test_generated_aliases_exhausted(self, client: TestClient):
        app.dependency_overrides[get_alias_generator] = ConstantGenerator

        first = client.post("/url", json={"url": "https://example.com"})
        assert first.json() == {"status": "OK", "alias": "same"}

        second = client.post("/url", json={"url": "https://other.com"})
        assert second.status_code == 500
        assert second.json() == {"status": "Error", "error": "url already exists"}

    def test_storage_failure_hides_details(self, client: TestClient):
        from shortlink_app.dependencies import get_url_store
        app.dependency_overrides[get_url_store] = BrokenStore

        response = client.post("/url", json={"url": "https://example.com"})

        assert response.status_code == 500
        assert response.json() == {"status": "Error", "error": "failed to add url"}
        assert "disk" not in response.text


class TestRedirectEndpoint:
    """Test GET /{alias}"""

    def test_redirect(self, client: TestClient):
        alias = client.post("/url", json={"url": "https://www.github.com/"}).json()["alias"]

        response = client.get(f"/{alias}", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "https://www.github.com/"

    def test_redirect_nonexistent(self, client: TestClient):
        response = client.get("/doesNotExist", follow_redirects=False)

        assert response.status_code == 404
        assert response.json() == {"status": "Error", "error": "not found"}

    def test_storage_failure(self, client: TestClient):
        from shortlink_app.dependencies import get_url_store
        app.dependency_overrides[get_url_store] = BrokenStore

        response = client.get("/abc", follow_redirects=False)

        assert response.status_code == 500
        assert response.json() == {"status": "Error", "error": "internal error"}

    def test_example_scenario(self, client: TestClient):
        """Generated and custom aliases side by side"""
        generated = client.post("/url", json={"url": "https://example.com"}).json()["alias"]
        assert client.get(f"/{generated}", follow_redirects=False).headers["location"] == "https://example.com"

        assert client.post("/url", json={"url": "https://example.com", "alias": "shop"}).json()["alias"] == "shop"
        rejected = client.post("/url", json={"url": "https://other.com", "alias": "shop"})
        assert rejected.json()["status"] == "Error"

        response = client.get("/shop", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "https://example.com"


class TestPlumbing:
    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_generated(self, client: TestClient):
        response = client.get("/health")

        assert len(response.headers["x-request-id"]) == 32

    def test_request_id_echoed(self, client: TestClient):
        response = client.get("/doesNotExist", headers={"X-Request-ID": "trace-42"})

        assert response.headers["x-request-id"] == "trace-42"

    def test_unhandled_error_keeps_envelope_and_request_id(self, client: TestClient):
        from shortlink_app.dependencies import get_url_store
        app.dependency_overrides[get_url_store] = CrashingStore

        response = client.get("/abc", headers={"X-Request-ID": "trace-500"})

        assert response.status_code == 500
        assert response.json() == {"status": "Error", "error": "internal error"}
        assert response.headers["x-request-id"] == "trace-500"
        assert "unexpected" not in response.text

    def test_route_name_alias_rejected(self, client: TestClient):
        response = client.post("/url", json={"url": "https://example.com", "alias": "health"})

        assert response.status_code == 400
        assert response.json()["error"] == "field alias is not a valid alias"
        assert client.get("/health").json()["status"] == "healthy"

    def test_url_with_surrounding_spaces_rejected(self, client: TestClient):
        response = client.post("/url", json={"url": " https://example.com "})

        assert response.status_code == 400
        assert response.json() == {"status": "Error", "error": "field url is not a valid URL"}
