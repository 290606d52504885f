import unittest
from unittest import mock

from storefront import cli
from storefront.deps import verify_password
from storefront.models.user import User
from tests.base import ApiTestCase


class TestStorefrontCtl(ApiTestCase):
    def _run(self, *argv: str) -> int:
        with mock.patch.object(cli, "SessionLocal", self.Session), mock.patch("builtins.print"):
            return cli.main(list(argv))

    def test_seed_admin_creates_admin_once(self) -> None:
        self.assertEqual(self._run("seed-admin", "--username", "Root", "--password", "secret123"), 0)
        self.assertEqual(self._run("seed-admin", "--username", "root", "--password", "other-pass"), 0)

        db = self.Session()
        try:
            users = db.query(User).all()
            self.assertEqual(len(users), 1)
            self.assertEqual(users[0].username, "root")
            self.assertTrue(users[0].is_admin)
            self.assertTrue(verify_password("secret123", users[0].password_hash))
        finally:
            db.close()

        headers = self.login("root")
        self.assertEqual(self.client.get("/api/users", headers=headers).status_code, 200)

    def test_reset_password(self) -> None:
        self.create_user("alice", "secret123")
        self.assertEqual(self._run("reset-password", "--username", "alice", "--password", "fresh-pass"), 0)
        self.login("alice", "fresh-pass")

    def test_reset_password_for_unknown_user_fails(self) -> None:
        self.assertEqual(self._run("reset-password", "--username", "ghost", "--password", "fresh-pass"), 1)

    def test_db_upgrade_delegates_to_alembic(self) -> None:
        with mock.patch.object(cli.subprocess, "call", return_value=0) as mocked_call:
            self.assertEqual(self._run("db", "upgrade"), 0)
        mocked_call.assert_called_once_with(["alembic", "-c", "alembic.ini", "upgrade", "head"])


if __name__ == "__main__":
    unittest.main()
