import pytest
from unittest.mock import MagicMock

from hobbyclass.application.session_store import (
    DEMO_PASSWORD,
    LOGIN_FAILED,
    STORAGE_KEY,
    SessionStore,
)
from hobbyclass.domain.entities import Role
from hobbyclass.infrastructure.security import SessionTokenCodec


@pytest.mark.parametrize("username,password,role,email", [
    ("admin", "admin123", Role.ADMIN, "admin@hobbyclass.com"),
    ("mentor", "mentor123", Role.MENTOR, "mentor@hobbyclass.com"),
    ("student", "student123", Role.STUDENT, "student@hobbyclass.com"),
])
def test_login_fixed_credentials(session_store, username, password, role, email):
    """Тест входа по фиксированным учетным данным ролей"""
    result = session_store.login(username, password)
    assert result.success is True
    assert result.message == "Login successful"
    assert result.user.role == role
    assert result.user.email == email
    assert session_store.is_logged_in
    assert session_store.current_user == result.user


@pytest.mark.parametrize("identifier,expected_id", [
    ("johndoe@gmail.com", 1),
    ("jane doe", 2),
    ("ADMIN USER", 3),
])
def test_login_demo_password(session_store, identifier, expected_id):
    """Тест входа любого пользователя по email или имени с демо-паролем"""
    result = session_store.login(identifier, DEMO_PASSWORD)
    assert result.success is True
    assert result.user.id == expected_id


def test_login_email_is_case_sensitive(session_store):
    """Email сравнивается точно, в отличие от имени"""
    result = session_store.login("JOHNDOE@GMAIL.COM", DEMO_PASSWORD)
    assert result.success is False


@pytest.mark.parametrize("username,password", [
    ("admin", "wrong"),
    ("admin", DEMO_PASSWORD),
    ("nobody@example.com", DEMO_PASSWORD),
    ("John Doe", "admin123"),
    ("", ""),
])
def test_login_invalid_credentials(session_store, storage, username, password):
    """Тест входа с неверными учетными данными"""
    result = session_store.login(username, password)
    assert result.success is False
    assert result.message == LOGIN_FAILED
    assert result.user is None
    assert not session_store.is_logged_in
    assert storage.get_item(STORAGE_KEY) is None


def test_failed_login_keeps_existing_session(session_store):
    """Неудачный вход не меняет текущую сессию"""
    session_store.login("mentor", "mentor123")
    before = session_store.session
    result = session_store.login("admin", "nope")
    assert result.success is False
    assert session_store.session == before
    assert session_store.is_mentor()


def test_fixed_credential_target_removed(session_store, registry):
    """Если целевой пользователь удален, вход по фиксированным данным не проходит"""
    registry.delete(3)
    result = session_store.login("admin", "admin123")
    assert result.success is False
    assert not session_store.is_logged_in


def test_role_predicates(session_store):
    """Тест предикатов ролей"""
    assert not session_store.is_admin()
    assert not session_store.is_mentor()
    assert not session_store.is_student()

    session_store.login("student", "student123")
    assert session_store.is_student()
    assert not session_store.is_admin()
    assert not session_store.is_mentor()


@pytest.mark.parametrize("username,password", [
    ("admin", "admin123"),
    ("mentor", "mentor123"),
    ("student", "student123"),
])
def test_logout_clears_everything(session_store, storage, username, password):
    """После выхода все предикаты ролей возвращают False"""
    session_store.login(username, password)
    assert storage.get_item(STORAGE_KEY) is not None

    session_store.logout()
    assert not session_store.is_logged_in
    assert session_store.current_user is None
    assert not session_store.is_admin()
    assert not session_store.is_mentor()
    assert not session_store.is_student()
    assert storage.get_item(STORAGE_KEY) is None


def test_login_persists_token(session_store, storage, codec):
    """Тест сохранения сессии в хранилище"""
    result = session_store.login("admin", "admin123")
    token = storage.get_item(STORAGE_KEY)
    assert token is not None
    assert codec.decode(token) == result.user


def test_restore_session(registry, storage, codec):
    """Сессия восстанавливается из хранилища при новом запуске"""
    first = SessionStore(registry, storage=storage, codec=codec)
    first.login("mentor", "mentor123")

    second = SessionStore(registry, storage=storage, codec=codec)
    assert not second.is_logged_in
    session = second.restore()
    assert session.logged_in
    assert second.is_mentor()
    assert second.current_user.email == "mentor@hobbyclass.com"


def test_restore_without_saved_session(session_store):
    """Пустое хранилище — пустая сессия"""
    session = session_store.restore()
    assert not session.logged_in
    assert session.user is None


def test_restore_discards_tampered_token(registry, storage):
    """Токен, подписанный чужим ключом, удаляется"""
    forged = SessionTokenCodec(secret_key="attacker").encode(registry.find(3))
    storage.set_item(STORAGE_KEY, forged)

    store = SessionStore(registry, storage=storage, codec=SessionTokenCodec(secret_key="test-secret"))
    session = store.restore()
    assert not session.logged_in
    assert storage.get_item(STORAGE_KEY) is None


def test_restore_discards_garbage(session_store, storage):
    storage.set_item(STORAGE_KEY, "not-a-token")
    assert not session_store.restore().logged_in
    assert storage.get_item(STORAGE_KEY) is None


def test_without_storage_is_memory_only(registry):
    """Без хранилища вход и выход работают только в памяти"""
    store = SessionStore(registry)
    assert store.login("admin", "admin123").success
    assert store.is_admin()
    store.logout()
    assert not store.is_logged_in
    assert not store.restore().logged_in


def test_listeners_are_notified(session_store):
    """Подписчики получают новую сессию при входе и выходе"""
    listener = MagicMock()
    unsubscribe = session_store.subscribe(listener)

    session_store.login("admin", "admin123")
    session_store.login("admin", "bad")
    session_store.logout()

    assert listener.call_count == 2
    assert listener.call_args_list[0].args[0].logged_in is True
    assert listener.call_args_list[1].args[0].logged_in is False

    unsubscribe()
    session_store.login("admin", "admin123")
    assert listener.call_count == 2


def test_session_invariant(session_store):
    """logged_in истинно тогда и только тогда, когда есть пользователь"""
    assert session_store.session.logged_in is (session_store.session.user is not None)
    session_store.login("student", "student123")
    assert session_store.session.logged_in is (session_store.session.user is not None)
    session_store.logout()
    assert session_store.session.logged_in is (session_store.session.user is not None)
