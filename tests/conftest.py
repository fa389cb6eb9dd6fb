"""Pytest configuration and fixtures.

DATABASE_URL is pointed at in-memory SQLite before app.main is imported, so
no test needs a MySQL server. HTTP tests run against the FastAPI app through
httpx's ASGI transport with the store dependency swapped for an
InMemoryEmployeeStore.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlmodel import Session, SQLModel

from app.api.dependencies import get_employee_store
from app.core.database import build_engine
from app.core.exceptions import StoreError
from app.main import app, lifespan
from app.models.employee import Employee
from app.repositories.memory import InMemoryEmployeeStore
from app.repositories.sql import SqlEmployeeStore


def make_employee(name: str, role: str = "Dev", is_active: bool = True) -> Employee:
    return Employee(name=name, role=role, is_active=is_active)


class FailingEmployeeStore:
    """Store whose every call fails like an unreachable database."""

    def _fail(self, operation: str):
        raise StoreError(operation, "connection refused")

    def add(self, employee):
        self._fail("add")

    def get(self, employee_id):
        self._fail("get")

    def update(self, employee):
        self._fail("update")

    def delete(self, employee_id):
        self._fail("delete")

    def enumerate(self):
        self._fail("enumerate")


class TimingOutEmployeeStore(FailingEmployeeStore):
    """Store whose backend times out without translating the error."""

    def _fail(self, operation: str):
        raise TimeoutError(f"{operation} timed out")


@pytest.fixture
def store() -> InMemoryEmployeeStore:
    return InMemoryEmployeeStore()


@pytest.fixture
def scenario_store() -> InMemoryEmployeeStore:
    """Bob (active) and Amy (inactive), both developers."""
    return InMemoryEmployeeStore(
        [
            make_employee("Bob", "Dev", True),
            make_employee("Amy", "Dev", False),
        ]
    )


@pytest.fixture
def sql_engine():
    engine = build_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sql_engine):
    with Session(sql_engine) as session:
        yield SqlEmployeeStore(session)


@pytest.fixture
async def client(store: InMemoryEmployeeStore) -> AsyncClient:
    """Async HTTP client against the app, backed by the ``store`` fixture."""
    app.dependency_overrides[get_employee_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def failing_client() -> AsyncClient:
    """Async HTTP client whose store raises StoreError on every call."""
    app.dependency_overrides[get_employee_store] = FailingEmployeeStore
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def timeout_client() -> AsyncClient:
    """Async HTTP client whose store raises TimeoutError on every call.

    Starlette re-raises errors answered by the catch-all handler after the
    response is sent, so the transport must not propagate them.
    """
    app.dependency_overrides[get_employee_store] = TimingOutEmployeeStore
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def wired_client() -> AsyncClient:
    """Async HTTP client using the real session and SQL store dependencies.

    Runs the app lifespan so tables are created on the DATABASE_URL engine
    (in-memory SQLite); the engine is disposed on exit.
    """
    app.dependency_overrides.clear()
    async with lifespan(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
