import pytest
from httpx import ASGITransport, AsyncClient

from worklog.core.config import Settings
from worklog.db.session import Database
from worklog.main import create_app


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        seed_default_users=True,
        log_level="WARNING",
    )


@pytest.fixture
async def database(settings):
    database = Database.from_settings(settings)
    await database.start(seed=settings.seed_default_users)
    yield database
    await database.dispose()


@pytest.fixture
async def session(database):
    async with database.session() as session:
        yield session


@pytest.fixture
def app(settings, database):
    application = create_app(settings)
    application.state.database = database
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def work_update_payload():
    return {
        "username": "alice",
        "name": "Alice Smith",
        "date": "2024-05-01",
        "projectType": "internal",
        "projectName": "Billing",
        "workDone": "Fixed invoice rounding",
        "task": "BILL-42",
        "helpTaken": "none",
        "status": "done",
    }


@pytest.fixture
def submit_factory(client, work_update_payload):
    async def _submit(**overrides):
        data = dict(work_update_payload)
        data.update(overrides)
        response = await client.post("/work-update", json=data)
        assert response.status_code == 200
        return response.json()["id"]

    return _submit
