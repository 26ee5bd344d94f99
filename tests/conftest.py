"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory session, a MockTransport helper for canned responses, and a
small FastAPI app standing in for the fleet backend.
"""

from typing import Any, Callable, Optional

import httpx
import pytest
from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from fleetconsole.shared.config import Settings, get_settings
from fleetconsole.shared.navigation import Navigator
from fleetconsole.shared.session import SessionContext
from fleetconsole.shared.storage import MemoryStorage


BASE_URL = "http://testserver/api"

# Credentials the fake backend accepts
BACKEND_EMAIL = "dispatcher@fleet.com"
BACKEND_PASSWORD = "s3cret"
BACKEND_TOKEN = "backend-token-abc"

BACKEND_USER = {
    "id": 42,
    "email": BACKEND_EMAIL,
    "firstName": "Dana",
    "lastName": "Dispatcher",
    "role": "admin",
    "department": "operations",
}

BACKEND_VEHICLES = [
    {"id": i, "plateNumber": f"VH-{i:03d}", "make": "Ford", "status": "active"}
    for i in range(1, 26)
]

BACKEND_DRIVERS = [
    {"id": 1, "employeeId": "EMP001", "firstName": "John", "status": "active"},
    {"id": 2, "employeeId": "EMP002", "firstName": "Sarah", "status": "inactive"},
]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage() -> MemoryStorage:
    """Provide an empty in-memory session store."""
    return MemoryStorage()


@pytest.fixture
def session(storage: MemoryStorage) -> SessionContext:
    """Provide a session context starting on the dashboard route."""
    return SessionContext(storage, Navigator(initial_route="/dashboard"))


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at the fake backend with in-memory storage."""
    return Settings(
        api_base_url=BASE_URL,
        storage_backend="memory",
        session_file=tmp_path / "session.json",
        enable_demo_accounts=False,
        data_source="live",
    )


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the ``mock_transport`` factory."""
    return []


@pytest.fixture
def mock_transport(recorded_requests):
    """
    Factory for a MockTransport answering every request with ``handler``.

    ``handler`` gets the request and returns an httpx.Response, or raises
    an httpx.TransportError to simulate an unreachable server.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        def record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.MockTransport(record)

    return factory


def _paged(key: str, records: list[dict[str, Any]], page: int, limit: int) -> dict[str, Any]:
    total_pages = max((len(records) + limit - 1) // limit, 1)
    start = (page - 1) * limit
    return {
        "success": True,
        "data": {
            key: records[start:start + limit],
            "pagination": {
                "currentPage": page,
                "totalPages": total_pages,
                "totalItems": len(records),
                "hasNextPage": page < total_pages,
                "hasPrevPage": page > 1,
                "limit": limit,
            },
        },
    }


def create_fake_backend() -> FastAPI:
    """A minimal fleet API: auth, vehicles, drivers and the dashboard."""
    app = FastAPI()
    app.state.logout_calls = 0

    def unauthorized() -> JSONResponse:
        return JSONResponse(
            status_code=401,
            content={"success": False, "message": "Access denied. Invalid token."},
        )

    def authorized(authorization: Optional[str]) -> bool:
        return authorization == f"Bearer {BACKEND_TOKEN}"

    @app.post("/api/auth/login")
    async def login(request: Request):
        body = await request.json()
        if body.get("email") == BACKEND_EMAIL and body.get("password") == BACKEND_PASSWORD:
            return {
                "success": True,
                "message": "Login successful",
                "data": {"token": BACKEND_TOKEN, "user": BACKEND_USER},
            }
        return JSONResponse(
            status_code=401,
            content={"success": False, "message": "Invalid email or password"},
        )

    @app.get("/api/auth/me")
    async def me(authorization: Optional[str] = Header(None)):
        if not authorized(authorization):
            return unauthorized()
        return {"success": True, "data": {"user": BACKEND_USER}}

    @app.post("/api/auth/logout")
    async def logout():
        app.state.logout_calls += 1
        return {"success": True, "message": "Logged out"}

    @app.get("/api/vehicles")
    async def vehicles(
        page: int = 1,
        limit: int = 10,
        status: Optional[str] = None,
        authorization: Optional[str] = Header(None),
    ):
        if not authorized(authorization):
            return unauthorized()
        records = [v for v in BACKEND_VEHICLES if status is None or v["status"] == status]
        return _paged("vehicles", records, page, limit)

    @app.get("/api/drivers")
    async def drivers(
        page: int = 1,
        limit: int = 10,
        authorization: Optional[str] = Header(None),
    ):
        if not authorized(authorization):
            return unauthorized()
        return _paged("drivers", BACKEND_DRIVERS, page, limit)

    @app.get("/api/dashboard/overview")
    async def overview(authorization: Optional[str] = Header(None)):
        if not authorized(authorization):
            return unauthorized()
        return {"success": True, "data": {"vehicles": {"total": len(BACKEND_VEHICLES)}}}

    return app


@pytest.fixture
def fake_backend() -> FastAPI:
    """Fresh fake backend for each test."""
    return create_fake_backend()


@pytest.fixture
def backend_transport(fake_backend: FastAPI) -> httpx.ASGITransport:
    """Transport routing requests into the fake backend in-process."""
    return httpx.ASGITransport(app=fake_backend)


@pytest.fixture
def backend_account() -> dict[str, Any]:
    """Credentials, token and user the fake backend knows about."""
    return {
        "email": BACKEND_EMAIL,
        "password": BACKEND_PASSWORD,
        "token": BACKEND_TOKEN,
        "user": dict(BACKEND_USER),
    }
