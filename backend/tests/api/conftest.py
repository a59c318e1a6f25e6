"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness checks hit the test engine
    - login() sets a signed token cookie on the client for the given email
"""

import pytest
from httpx import ASGITransport, AsyncClient

from jobhorizon.api.dependencies import get_token_service
from jobhorizon.infrastructure.database import get_db, DatabaseSessionManager
import jobhorizon.infrastructure.database as db_module
from jobhorizon.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def login(client):
    """Replace the client's token cookie with one for `email`."""
    def _login(email: str | None, **claims) -> str:
        if email is not None:
            claims["email"] = email
        token = get_token_service().issue(claims)
        client.cookies.clear()
        client.cookies.set("token", token)
        return token

    return _login


@pytest.fixture
def job_body():
    """A posting as the frontend submits it."""
    def _job_body(title: str = "Engineer", owner: str = "a@x.com", **extra) -> dict:
        return {
            "jobTitle": title,
            "userEmail": owner,
            "jobCategory": "On-Site",
            "jobApplicantsNumber": 0,
            "salaryRange": {"min": 1000, "max": 2000},
            **extra,
        }

    return _job_body


@pytest.fixture
def add_job(client, login, job_body):
    """POST /add-job as the owner and return the new job's id."""
    async def _add_job(title: str = "Engineer", owner: str = "a@x.com", **extra) -> str:
        login(owner)
        res = await client.post("/add-job", json=job_body(title, owner, **extra))
        assert res.status_code == 200, res.text
        client.cookies.clear()
        return res.json()["insertedId"]

    return _add_job
