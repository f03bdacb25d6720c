from datetime import datetime
from typing import Optional

from starlette.testclient import TestClient
from debug_lib.main import Config, create_app


def make_client(started_at: Optional[datetime] = None) -> TestClient:
    """Build a TestClient over a fresh app; `started_at` pins its startup time."""
    return TestClient(create_app(Config(started_at=started_at)))


def replace_started_at(client: TestClient, started_at: datetime) -> None:
    """Swap the startup timestamp held by the client's app container."""
    client.app.state.container.register_singleton('started_at', started_at)
