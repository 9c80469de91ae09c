import pytest
from datetime import datetime, timedelta, timezone
from dependencies import build_stores, get_auth_service, get_stores
from enums import StoreBackendEnum
from logic.session import AuthService, SessionStorage
from main import app

class Clock: #controllable stand-in for datetime.now
    def __init__(self, start: datetime = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)

@pytest.fixture
def clock():
    return Clock()

@pytest.fixture(autouse=True)
def fresh_app_state(tmp_path):
    #every test gets empty in-memory stores and its own session file
    stores = build_stores(StoreBackendEnum.memory)
    auth = AuthService(SessionStorage(tmp_path / "session.json"))
    app.dependency_overrides[get_stores] = lambda: stores
    app.dependency_overrides[get_auth_service] = lambda: auth
    yield stores
    app.dependency_overrides.clear()
