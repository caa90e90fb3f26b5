import os

os.environ.setdefault("DB_URL", "sqlite://")
os.environ.setdefault("API_BASE_URL", "http://aceit.test")
os.environ.setdefault("REQUIRE_COMPLETE_SCORECARD", "false")

import json

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from aceit.database import Base, get_db, init_db
from aceit.main import create_app
from aceit.schema.event import UserContext
from aceit.services.api_client import AceItApiClient


class FakeAceItApi:
    """Records requests and answers like the remote AceIt API"""

    def __init__(self):
        self.events = []
        self.feedback = []
        self.details = {}
        self.submitted = []
        self.requests = []
        self.fail_with = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"message": "boom"})

        path = request.url.path
        if request.method == "POST" and path == "/interviews":
            return httpx.Response(200, json=self.events)
        if request.method == "POST" and path == "/feedback":
            return httpx.Response(200, json=self.feedback)
        if request.method == "POST" and path == "/feedback/submit":
            body = json.loads(request.content)
            self.submitted.append(body)
            return httpx.Response(201, json={"id": len(self.submitted)})
        if request.method == "GET" and path.startswith("/feedback/"):
            feedback_id = path.rsplit("/", 1)[-1]
            if feedback_id in self.details:
                return httpx.Response(200, json=self.details[feedback_id])
            return httpx.Response(404, json={"message": "not found"})
        return httpx.Response(404)


@pytest.fixture()
def fake_api():
    return FakeAceItApi()


@pytest.fixture()
def api_client(fake_api):
    return AceItApiClient(
        base_url="http://aceit.test",
        transport=httpx.MockTransport(fake_api.handler),
    )


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(api_client, db_session):
    app = create_app(api_client=api_client)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture()
def fellow():
    return UserContext(
        email="fellow@example.com",
        display_name="Fran Fellow",
        photo_url="https://example.com/fran.png",
        role="fellow",
    )


@pytest.fixture()
def admin():
    return UserContext(
        email="volunteer@example.com",
        display_name="Val Volunteer",
        role="admin",
    )
