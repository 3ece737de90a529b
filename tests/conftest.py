import copy
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from inq_admin_svc import config
from inq_admin_svc.app import app
from inq_admin_svc.routers.auth import get_api_client
from inq_admin_svc.services.session import SessionContext
from inq_admin_svc.utils.api_client import InquiryApiClient
from inq_admin_svc.utils.token_storage import MemoryTokenStorage

API_BASE = "http://api.test"
VALID_TOKEN = "valid-token"
OPERATOR_EMAIL = "operator@example.com"
OPERATOR_PASSWORD = "secret-pw"

SAMPLE_INQUIRIES = [
    {
        "id": 1,
        "fullName": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "loanAmount": 500000,
        "loanType": "home",
        "employmentType": "salaried",
        "monthlyIncome": 85000,
        "status": "pending",
        "createdAt": "2024-03-05T14:30:00",
    },
    {
        "id": 2,
        "fullName": "Vikram Shah",
        "email": "vikram@example.com",
        "phone": "9123456780",
        "loanAmount": 250000,
        "loanType": "personal",
        "employmentType": "self-employed",
        "monthlyIncome": 60000,
        "status": "approved",
        "createdAt": "2024-03-06T09:05:00",
    },
    {
        "id": 3,
        "fullName": "Meera Iyer",
        "email": "meera@example.com",
        "phone": "9988776655",
        "loanAmount": 1200000,
        "loanType": "business",
        "employmentType": "business",
        "monthlyIncome": 150000,
        "status": "rejected",
        "createdAt": "2024-03-07T18:45:00",
    },
]


class FakeInquiryApi:
    """In-memory stand-in for the remote inquiries API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.records = copy.deepcopy(SAMPLE_INQUIRIES)
        self.stats = {"totalContacts": 42, "newContacts": 5, "todayContacts": 2}
        self.requests = []
        # methods answered with a 500 regardless of path
        self.failing_methods = set()
        self.network_down = False

    def calls(self, method: str) -> list:
        return [r for r in self.requests if r.method == method]

    def _find(self, inquiry_id: str):
        for record in self.records:
            if str(record["id"]) == inquiry_id:
                return record
        return None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.network_down:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method in self.failing_methods:
            return httpx.Response(500, json={"message": "Internal server error"})

        path = request.url.path
        if request.method == "POST" and path == "/api/auth/login":
            body = json.loads(request.content)
            if body.get("email") == OPERATOR_EMAIL and body.get("password") == OPERATOR_PASSWORD:
                return httpx.Response(200, json={"token": VALID_TOKEN})
            return httpx.Response(401, json={"message": "Invalid credentials"})

        if request.headers.get("Authorization") != f"Bearer {VALID_TOKEN}":
            return httpx.Response(401, json={"message": "Unauthorized"})

        if request.method == "GET" and path == "/api/inquiries":
            return httpx.Response(200, json=copy.deepcopy(self.records))
        if request.method == "GET" and path == "/api/contacts/stats":
            return httpx.Response(200, json=self.stats)
        if path.startswith("/api/inquiries/"):
            record = self._find(path.rsplit("/", 1)[-1])
            if record is None:
                return httpx.Response(404, json={"message": "Inquiry not found"})
            if request.method == "PATCH":
                record["status"] = json.loads(request.content)["status"]
                return httpx.Response(200, json=record)
            if request.method == "DELETE":
                self.records.remove(record)
                return httpx.Response(200, json={"message": "Inquiry deleted"})
        return httpx.Response(404, json={"message": "Not found"})


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_api():
    return FakeInquiryApi()


@pytest.fixture
def api_client(fake_api):
    return InquiryApiClient(API_BASE, transport=httpx.MockTransport(fake_api.handler))


@pytest.fixture
def token_storage():
    return MemoryTokenStorage()


@pytest.fixture
def session(token_storage, api_client):
    return SessionContext(token_storage, api_client)


@pytest.fixture
def authed_session(session, token_storage):
    token_storage.set(VALID_TOKEN)
    return session


@pytest.fixture
def client(api_client):
    app.dependency_overrides[get_api_client] = lambda: api_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def authed_client(client):
    client.cookies.set(config.TOKEN_STORAGE_KEY, VALID_TOKEN)
    return client
