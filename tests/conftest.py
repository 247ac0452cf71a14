import json

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import smeease.models  # noqa: F401
from smeease.database import Base, get_db
from smeease.main import app
from smeease.utils.api_client import ApiClient

BASE_URL = "http://testserver/api"


# ---- reference backend on a throwaway SQLite database ----
@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def backend(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def http_client(backend):
    # Not used as a context manager so the startup hook never touches the real database
    return TestClient(backend)


@pytest.fixture
async def api(backend):
    transport = httpx.ASGITransport(app=backend)
    async with ApiClient(base_url=BASE_URL, transport=transport) as client:
        yield client


# ---- scripted backend for controller tests ----
class FakeBackend:
    """Answers requests from a table of ``(method, path) -> (status, body)``.

    A route may also map to a list of answers, consumed in order, or to a
    callable taking the request. Every request is recorded in ``calls``.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        key = (request.method, request.url.path)
        answer = self.routes.get(key)
        if isinstance(answer, list):
            answer = answer.pop(0) if len(answer) > 1 else answer[0]
        if answer is None:
            return httpx.Response(404, json={"error": f"No route for {request.method} {request.url.path}"})
        if callable(answer):
            return answer(request)
        status, body = answer
        if isinstance(body, (str, bytes)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def set(self, method, path, status, body):
        self.routes[(method, "/api" + path)] = (status, body)

    def requests_to(self, method, path):
        return [r for r in self.calls if r.method == method and r.url.path == "/api" + path]

    @staticmethod
    def body(request):
        return json.loads(request.content)


@pytest.fixture
def fake():
    return FakeBackend()


@pytest.fixture
async def fake_api(fake):
    async with ApiClient(base_url=BASE_URL, transport=httpx.MockTransport(fake)) as client:
        yield client
