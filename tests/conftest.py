import os
import sys
import pytest

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

# Настройки читаются при импорте приложения, поэтому выставляем до него
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")

from hobbyclass.application.session_store import SessionStore
from hobbyclass.application.user_registry import UserRegistry
from hobbyclass.infrastructure.seed import seed_users
from hobbyclass.infrastructure.security import SessionTokenCodec
from hobbyclass.infrastructure.storage import MemoryStorage


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Настройка тестового окружения"""
    # Redis в тестах не нужен: хранилище в памяти
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/99")


@pytest.fixture
def registry():
    return UserRegistry(seed_users())


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def codec():
    return SessionTokenCodec(secret_key="test-secret")


@pytest.fixture
def session_store(registry, storage, codec):
    return SessionStore(registry, storage=storage, codec=codec)
