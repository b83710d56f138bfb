import os

# Settings are read at import time; point them at an in-memory database first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CODEC_SALT", "test-salt")
os.environ.setdefault("ENABLE_METRICS", "false")
os.environ.setdefault("LOG_FORMAT", "console")

from collections.abc import Callable, Generator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from shiftboard.api.deps import get_registry  # noqa: E402
from shiftboard.core.codec import IdentifierCodec  # noqa: E402
from shiftboard.core.db import engine, init_db  # noqa: E402
from shiftboard.infrastructure.database.repositories import (  # noqa: E402
    SqlSchedulingStore,
)
from shiftboard.infrastructure.registry import EmployeeRegistryClient  # noqa: E402
from shiftboard.main import app  # noqa: E402

RegistryHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_db() -> Generator[None, None, None]:
    """Give every test freshly created tables."""
    init_db(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session: Session) -> SqlSchedulingStore:
    return SqlSchedulingStore(session)


@pytest.fixture
def codec() -> IdentifierCodec:
    return IdentifierCodec("test-salt")


@pytest.fixture
def registry_handler() -> dict[str, RegistryHandler]:
    """Per-path handlers for the fake employee registry; tests fill it in."""
    return {}


@pytest.fixture
def registry(
    registry_handler: dict[str, RegistryHandler],
) -> Generator[EmployeeRegistryClient, None, None]:
    def dispatch(request: httpx.Request) -> httpx.Response:
        handler = registry_handler.get(request.url.path)
        if handler is None:
            return httpx.Response(404)
        return handler(request)

    transport = httpx.MockTransport(dispatch)
    client = EmployeeRegistryClient(
        base_url="http://registry.test",
        client=httpx.Client(base_url="http://registry.test", transport=transport),
    )
    yield client
    client.close()


@pytest.fixture
def client(registry: EmployeeRegistryClient) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
