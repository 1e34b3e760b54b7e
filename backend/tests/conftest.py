"""Test fixtures — temporary device store and FastAPI test client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lanwake.main import create_app
from lanwake.services import get_device_store
from lanwake.services.device_store import DeviceStore


@pytest.fixture
def devices_file(tmp_path):
    """Path of a devices file that does not exist yet."""
    return tmp_path / "data" / "devices.json"


@pytest.fixture
def store(devices_file):
    """Fresh device store backed by a temp file."""
    return DeviceStore(str(devices_file))


@pytest_asyncio.fixture
async def client(store: DeviceStore):
    """Provide an async test client with the device store overridden."""
    app = create_app()
    app.dependency_overrides[get_device_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
