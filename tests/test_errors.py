import unittest
from unittest import mock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from storefront.main import app
from tests.base import ApiTestCase


class TestErrorResponses(ApiTestCase):
    def test_database_failure_is_a_generic_500(self) -> None:
        failure = OperationalError("SELECT * FROM products", {}, Exception("disk I/O error at /var/db"))
        with mock.patch("storefront.services.products.list_products", side_effect=failure):
            response = self.client.get("/api/products")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Internal server error"})
        self.assertNotIn("disk", response.text)

    def test_unexpected_error_is_a_generic_500(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        with mock.patch("storefront.services.products.get_product", side_effect=RuntimeError("boom")):
            response = client.get("/api/products/1")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Internal server error"})

    def test_unknown_route_uses_message_body(self) -> None:
        response = self.client.get("/api/nothing-here")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"message": "Not Found"})

    def test_malformed_json_is_a_validation_error(self) -> None:
        response = self.client.post(
            "/api/auth/login",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("message", response.json())

    def test_non_integer_id_is_a_validation_error(self) -> None:
        response = self.client.get("/api/products/abc")
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["message"].startswith("path.product_id"))

    def test_health(self) -> None:
        self.assertEqual(self.client.get("/health").json(), {"ok": True})


if __name__ == "__main__":
    unittest.main()
