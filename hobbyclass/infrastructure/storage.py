import redis
import structlog
from typing import Optional
from ..config import settings

logger = structlog.get_logger()

_redis_client: Optional[redis.Redis] = None

def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True
        )
    return _redis_client


class RedisStorage:
    """Local-storage над Redis. Всё best-effort: ошибки Redis только логируются."""

    def __init__(self, prefix: str = None):
        self.prefix = settings.STORAGE_KEY_PREFIX if prefix is None else prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get_item(self, key: str) -> Optional[str]:
        try:
            return get_redis().get(self._key(key))
        except redis.RedisError as e:
            logger.warning("storage_unavailable", op="get", key=key, error=str(e))
            return None

    def set_item(self, key: str, value: str) -> bool:
        try:
            get_redis().set(self._key(key), value)
            return True
        except redis.RedisError as e:
            logger.warning("storage_unavailable", op="set", key=key, error=str(e))
            return False

    def remove_item(self, key: str) -> bool:
        try:
            get_redis().delete(self._key(key))
            return True
        except redis.RedisError as e:
            logger.warning("storage_unavailable", op="remove", key=key, error=str(e))
            return False


class MemoryStorage:
    def __init__(self):
        self.items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> bool:
        self.items[key] = value
        return True

    def remove_item(self, key: str) -> bool:
        self.items.pop(key, None)
        return True


def create_storage(backend: str = None):
    """redis | memory | none; без хранилища сессия живёт только в памяти."""
    backend = (backend or settings.STORAGE_BACKEND).lower()
    if backend == "redis":
        return RedisStorage()
    if backend == "memory":
        return MemoryStorage()
    if backend == "none":
        return None
    raise ValueError(f"Unknown storage backend: {backend}")
