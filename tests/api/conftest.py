"""API test fixtures: apps per environment + httpx test clients.

Invariants:
    - Every test gets a fresh app built from explicit Settings (no env mutation)
    - Each app carries a /boom route that raises, to exercise the exception middleware

Design Decisions:
    - httpx AsyncClient over ASGITransport: drives the full middleware stack in-process
"""

import pytest
from fastapi import APIRouter
from httpx import ASGITransport, AsyncClient

from employee_service.config import Settings
from employee_service.main import create_app

FAILURE_MESSAGE = "database password is hunter2"


def _failing_router() -> APIRouter:
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError(FAILURE_MESSAGE)

    @router.post("/employees/v1/boom")
    async def boom_post():
        raise KeyError("missing")

    return router


def _build_app(environment: str):
    app = create_app(Settings(environment=environment, _env_file=None))
    app.include_router(_failing_router())
    return app


@pytest.fixture
def production_app():
    return _build_app("Production")


@pytest.fixture
def development_app():
    return _build_app("Development")


@pytest.fixture
async def client(production_app):
    async with AsyncClient(
        transport=ASGITransport(app=production_app), base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def dev_client(development_app):
    async with AsyncClient(
        transport=ASGITransport(app=development_app), base_url="http://test",
    ) as ac:
        yield ac
