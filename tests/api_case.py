import unittest

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from balancesheet.database import create_db_and_tables
from balancesheet.main import create_app


class ApiTestCase(unittest.TestCase):
    """App completa contra SQLite en memoria, una base nueva por test."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        create_db_and_tables(self.engine)
        self.app = create_app(engine=self.engine)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        self.engine.dispose()

    def session(self) -> Session:
        return Session(self.engine)

    def register(self, username: str = "alice", password: str = "pw123456", email: str = None) -> dict:
        response = self.client.post(
            "/auth/register",
            json={"username": username, "password": password, "email": email or f"{username}@x.com"},
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def auth_headers(self, username: str = "alice") -> dict:
        token = self.register(username)["token"]
        return {"Authorization": f"Bearer {token}"}
