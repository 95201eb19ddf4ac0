import pytest
import redis
from jose import jwt
from unittest.mock import MagicMock, patch

from hobbyclass.application.session_store import InvalidSessionToken, STORAGE_KEY, SessionStore
from hobbyclass.infrastructure.security import SessionTokenCodec
from hobbyclass.infrastructure.storage import MemoryStorage, RedisStorage, create_storage


@patch('hobbyclass.infrastructure.storage.get_redis')
def test_redis_get_item(mock_redis):
    """Тест чтения значения из Redis"""
    mock_client = MagicMock()
    mock_client.get.return_value = "token"
    mock_redis.return_value = mock_client

    storage = RedisStorage(prefix="test:")
    assert storage.get_item(STORAGE_KEY) == "token"
    mock_client.get.assert_called_once_with("test:currentUser")


@patch('hobbyclass.infrastructure.storage.get_redis')
def test_redis_set_item(mock_redis):
    """Тест записи значения в Redis"""
    mock_client = MagicMock()
    mock_redis.return_value = mock_client

    assert RedisStorage(prefix="test:").set_item(STORAGE_KEY, "token") is True
    mock_client.set.assert_called_once_with("test:currentUser", "token")


@patch('hobbyclass.infrastructure.storage.get_redis')
def test_redis_remove_item(mock_redis):
    """Тест удаления значения из Redis"""
    mock_client = MagicMock()
    mock_redis.return_value = mock_client

    assert RedisStorage(prefix="test:").remove_item(STORAGE_KEY) is True
    mock_client.delete.assert_called_once_with("test:currentUser")


@patch('hobbyclass.infrastructure.storage.get_redis')
def test_redis_unavailable(mock_redis):
    """Недоступный Redis не ломает работу: операции просто не выполняются"""
    mock_client = MagicMock()
    mock_client.get.side_effect = redis.ConnectionError("down")
    mock_client.set.side_effect = redis.ConnectionError("down")
    mock_client.delete.side_effect = redis.ConnectionError("down")
    mock_redis.return_value = mock_client

    storage = RedisStorage()
    assert storage.get_item(STORAGE_KEY) is None
    assert storage.set_item(STORAGE_KEY, "token") is False
    assert storage.remove_item(STORAGE_KEY) is False


@patch('hobbyclass.infrastructure.storage.get_redis')
def test_login_survives_redis_outage(mock_redis, registry, codec):
    """Вход проходит даже если сохранить сессию не удалось"""
    mock_client = MagicMock()
    mock_client.set.side_effect = redis.ConnectionError("down")
    mock_redis.return_value = mock_client

    store = SessionStore(registry, storage=RedisStorage(), codec=codec)
    assert store.login("admin", "admin123").success
    assert store.is_admin()


def test_memory_storage():
    storage = MemoryStorage()
    assert storage.get_item("k") is None
    storage.set_item("k", "v")
    assert storage.get_item("k") == "v"
    storage.remove_item("k")
    storage.remove_item("k")
    assert storage.get_item("k") is None


def test_create_storage():
    assert isinstance(create_storage("memory"), MemoryStorage)
    assert isinstance(create_storage("REDIS"), RedisStorage)
    assert create_storage("none") is None
    with pytest.raises(ValueError):
        create_storage("sqlite")


def test_codec_round_trip(codec, registry):
    user = registry.find(5)
    token = codec.encode(user)
    assert codec.decode(token) == user
    claims = jwt.get_unverified_claims(token)
    assert claims["sub"] == "mentor@hobbyclass.com"
    assert claims["role"] == "mentor"


def test_codec_rejects_expired(registry):
    codec = SessionTokenCodec(secret_key="test-secret", ttl_minutes=-1)
    token = codec.encode(registry.find(1))
    with pytest.raises(InvalidSessionToken):
        codec.decode(token)


def test_codec_rejects_malformed_payload(codec):
    token = jwt.encode({"sub": "x@x.com", "user": {"id": 1}}, "test-secret", algorithm="HS256")
    with pytest.raises(InvalidSessionToken):
        codec.decode(token)


def test_codec_rejects_bad_role(codec):
    payload = {"user": {"id": 1, "name": "x", "email": "x@x.com", "role": "root", "status": "active"}}
    token = jwt.encode(payload, "test-secret", algorithm="HS256")
    with pytest.raises(InvalidSessionToken):
        codec.decode(token)
