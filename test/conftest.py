"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application modules are imported
- A seeded in-memory store (one screen, a few showtimes) per test
- Unit of work factory bound to that store
- TestClient running the real app against the same store

All tests run on the in-memory backend; the PostgreSQL adapters share the
repository interfaces exercised here.
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['STORAGE_BACKEND'] = 'memory'
    os.environ.setdefault('DEBUG', 'true')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402

from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_store import (  # noqa: E402
    InMemoryStore,
)
from src.service.cinema_booking.driven_adapter.repo.in_memory.in_memory_unit_of_work import (  # noqa: E402
    InMemoryUnitOfWork,
)
from test.cinema_test_data import seed_catalog  # noqa: E402


# =============================================================================
# Store fixtures
# =============================================================================
@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    seed_catalog(store)
    return store


@pytest.fixture
def uow_factory(store: InMemoryStore) -> Callable[[], InMemoryUnitOfWork]:
    return lambda: InMemoryUnitOfWork(store=store)


# =============================================================================
# API client
# =============================================================================
@pytest.fixture
def client(store: InMemoryStore) -> Generator[TestClient, None, None]:
    """TestClient over the real app, backed by this test's store."""
    from src.main import app

    container.in_memory_store.override(providers.Object(store))
    container.reset_singletons()
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        container.in_memory_store.reset_override()
        container.reset_singletons()
