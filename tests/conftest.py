import httpx
import pytest
from asgi_lifespan import LifespanManager

from stylelog.auth import deps as auth_deps
from stylelog.main import app
from stylelog.store import InMemoryOutfitStore, get_store


@pytest.fixture
def store():
    return InMemoryOutfitStore()


@pytest.fixture(autouse=True)
def override_deps(store):
    app.dependency_overrides[auth_deps.get_current_user_id] = lambda: "test-user"
    app.dependency_overrides[get_store] = lambda: store
    yield
    app.dependency_overrides.pop(auth_deps.get_current_user_id, None)
    app.dependency_overrides.pop(get_store, None)


@pytest.fixture
async def client():
    async with LifespanManager(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
