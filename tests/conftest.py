"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from nutrition_dashboard import main
from nutrition_dashboard.settings import Settings, get_settings
from nutrition_dashboard.wiring import (
    get_clock,
    provide_dashboard_service,
    provide_rate_limiter,
)

from tests.api.helpers import ACTOR_ID
from tests.fakes.clock import FrozenClock
from tests.fakes.dashboard import NutritionDashboardServiceFake, RateLimiterFake


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        dashboard_service_url="https://dashboard.example.com",
        dashboard_service_token="service-token",
        dashboard_service_timeout=5.0,
    )


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Wednesday 2024-05-15, late evening in UTC."""

    return FrozenClock(datetime(2024, 5, 15, 23, 30, tzinfo=timezone.utc))


@pytest.fixture
def dashboard_service_fake() -> NutritionDashboardServiceFake:
    return NutritionDashboardServiceFake()


@pytest.fixture
def rate_limiter_fake() -> RateLimiterFake:
    return RateLimiterFake()


@pytest.fixture
def auth_headers(settings: Settings) -> Dict[str, str]:
    return {"x-api-key": settings.api_key, "x-actor-member-id": ACTOR_ID}


@pytest.fixture
def app(
    settings: Settings,
    frozen_clock: FrozenClock,
    dashboard_service_fake: NutritionDashboardServiceFake,
    rate_limiter_fake: RateLimiterFake,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_clock: lambda: frozen_clock,
        provide_dashboard_service: lambda: dashboard_service_fake,
        provide_rate_limiter: lambda: rate_limiter_fake,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as api_client:
        yield api_client
