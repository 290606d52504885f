import unittest

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront import models  # noqa: F401
from storefront.db import Base, get_db
from storefront.main import app
from storefront.services import users as users_service


class ApiTestCase(unittest.TestCase):
    """Runs the app against a private in-memory SQLite database."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=self.engine)
        self.Session = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def _get_test_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_test_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    def create_user(self, username: str, password: str = "secret123", is_admin: bool = False) -> int:
        db = self.Session()
        try:
            return users_service.create_user(db, username, password, is_admin=is_admin).id
        finally:
            db.close()

    def login(self, username: str, password: str = "secret123") -> dict:
        response = self.client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )
        self.assertEqual(response.status_code, 200, response.text)
        return {"Authorization": f"Bearer {response.json()['token']}"}

    def admin_headers(self) -> dict:
        self.create_user("admin", is_admin=True)
        return self.login("admin")

    def user_headers(self) -> dict:
        self.create_user("alice")
        return self.login("alice")
