import pytest

from fastapi.testclient import TestClient
from hobbyclass.application.context import build_context
from hobbyclass.infrastructure import seed
from hobbyclass.infrastructure.security import SessionTokenCodec
from hobbyclass.infrastructure.storage import MemoryStorage
from hobbyclass.interfaces.http.rate_limit import limiter

# Импортируем app
from hobbyclass.main import app


def make_context(storage):
    return build_context(
        users=seed.seed_users(),
        mentor_classes=seed.seed_mentor_classes(),
        student_classes=seed.seed_student_classes(),
        profile=seed.default_mentor_profile(),
        storage=storage,
        codec=SessionTokenCodec(secret_key="test-secret"),
    )


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def use_context():
    """Подменяет контекст приложения и возвращает исходный после теста"""
    previous = app.state.context

    def _use(ctx):
        app.state.context = ctx
        return ctx

    yield _use
    app.state.context = previous


def test_full_flow(use_context, storage):
    """Интеграционный тест: регистрация, вход, работа админа, выход"""
    use_context(make_context(storage))
    client = TestClient(app)

    # 1. Регистрация
    response = client.post(
        "/api/auth/register",
        json={"username": "Carol", "email": "carol@gmail.com", "password": "pw123456"}
    )
    assert response.status_code == 201
    carol_id = response.json()["id"]

    # 2. Вход студентом и попытка открыть панель админа
    assert client.post("/api/auth/login", json={"username": "carol", "password": "demo123"}).status_code == 200
    response = client.get("/admin-dashboard", follow_redirects=False)
    assert response.headers["location"] == "/login"

    # 3. Запись на класс
    assert client.post("/api/student/classes/1/enroll").json()["enrolled"] is True

    # 4. Вход админом: новый пользователь виден в списке
    response = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    assert response.json()["redirect_to"] == "/admin-dashboard"
    users = client.get("/api/admin/users", params={"search": "carol"}).json()
    assert [u["id"] for u in users] == [carol_id]

    # 5. Удаление и выход
    assert client.delete(f"/api/admin/users/{carol_id}").status_code == 204
    client.post("/api/auth/logout")
    assert client.get("/api/admin/users").status_code == 403
    assert client.post("/api/auth/login", json={"username": "carol", "password": "demo123"}).status_code == 401


def test_session_restored_on_startup(use_context, storage):
    """После перезапуска сессия восстанавливается из хранилища"""
    use_context(make_context(storage))
    client = TestClient(app)
    client.post("/api/auth/login", json={"username": "mentor", "password": "mentor123"})

    # "перезагрузка": новый контекст над тем же хранилищем
    ctx = use_context(make_context(storage))
    assert not ctx.session.is_logged_in
    with TestClient(app) as restarted:
        assert ctx.session.is_mentor()
        data = restarted.get("/mentor-dashboard").json()
        assert data["view"] == "mentor_dashboard"
        assert data["navbar"]["user"]["email"] == "mentor@hobbyclass.com"


def test_logout_is_not_restored(use_context, storage):
    use_context(make_context(storage))
    client = TestClient(app)
    client.post("/api/auth/login", json={"username": "admin", "password": "admin123"})
    client.post("/api/auth/logout")

    ctx = use_context(make_context(storage))
    with TestClient(app):
        assert not ctx.session.is_logged_in


def test_rate_limiting(use_context, storage):
    """Тест rate limiting на логине"""
    use_context(make_context(storage))
    client = TestClient(app)
    limiter.reset()
    limiter.enabled = True
    try:
        codes = [
            client.post("/api/auth/login", json={"username": "admin", "password": "bad"}).status_code
            for _ in range(11)
        ]
    finally:
        limiter.enabled = False
        limiter.reset()
    assert codes[:10] == [401] * 10
    assert codes[10] == 429
