"""
Shared pytest fixtures for user-service tests.
"""
import os
from unittest.mock import AsyncMock, patch

import pytest

from user_service.core.config import Settings, reset_settings
from user_service.infrastructure.db.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_service",
        "STORAGE_BACKEND": "memory",
        "API_PREFIX": "api/v1",
        "LOG_LEVEL": "INFO",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def memory_settings(mock_env) -> Settings:
    """Settings selecting the in-memory storage backend."""
    return Settings()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Empty in-memory UserRepository."""
    return InMemoryUserRepository()
