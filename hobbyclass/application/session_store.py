from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import structlog

from ..domain.entities import Role, Session, User
from .dto import LoginResult
from .user_registry import UserRegistry

logger = structlog.get_logger()

STORAGE_KEY = "currentUser"
DEMO_PASSWORD = "demo123"
LOGIN_OK = "Login successful"
LOGIN_FAILED = "Invalid credentials"


class ISessionStorage:
    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> bool: ...
    def remove_item(self, key: str) -> bool: ...


class ISessionCodec:
    def encode(self, user: User) -> str: ...
    def decode(self, token: str) -> User: ...


class InvalidSessionToken(Exception):
    pass


@dataclass(frozen=True)
class FixedCredential:
    username: str
    password: str
    role: Role
    email: str | None = None

    def matches(self, user: User) -> bool:
        if user.role != self.role:
            return False
        return self.email is None or user.email == self.email


FIXED_CREDENTIALS = (
    FixedCredential("admin", "admin123", Role.ADMIN),
    FixedCredential("mentor", "mentor123", Role.MENTOR, "mentor@hobbyclass.com"),
    FixedCredential("student", "student123", Role.STUDENT, "student@hobbyclass.com"),
)

SessionListener = Callable[[Session], None]


class SessionStore:
    """Owns the current session and keeps the persisted copy in sync.

    Storage is optional: without it login/logout only change memory.
    Listeners registered with ``subscribe`` are called after every change.
    """

    def __init__(
        self,
        registry: UserRegistry,
        storage: ISessionStorage | None = None,
        codec: ISessionCodec | None = None,
    ):
        self.registry = registry
        self.storage = storage
        self.codec = codec
        self._session = Session()
        self._listeners: list[SessionListener] = []

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_logged_in(self) -> bool:
        return self._session.logged_in

    @property
    def current_user(self) -> User | None:
        return self._session.user

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def login(self, username: str, password: str) -> LoginResult:
        user = self._authenticate(username, password)
        if user is None:
            logger.info("login_failed", username=username)
            return LoginResult(success=False, message=LOGIN_FAILED)
        self._set(Session(user=user))
        self._persist(user)
        logger.info("login_succeeded", user_id=user.id, role=user.role.value)
        return LoginResult(success=True, message=LOGIN_OK, user=user)

    def logout(self) -> None:
        previous = self.current_user
        self._set(Session())
        if self._has_storage():
            self.storage.remove_item(STORAGE_KEY)
        logger.info("logout", user_id=previous.id if previous else None)

    def restore(self) -> Session:
        if not self._has_storage():
            return self._session
        token = self.storage.get_item(STORAGE_KEY)
        if not token:
            return self._session
        try:
            user = self.codec.decode(token)
        except InvalidSessionToken:
            logger.warning("session_token_discarded")
            self.storage.remove_item(STORAGE_KEY)
            return self._session
        self._set(Session(user=user))
        logger.info("session_restored", user_id=user.id, role=user.role.value)
        return self._session

    def is_admin(self) -> bool:
        return self._has_role(Role.ADMIN)

    def is_mentor(self) -> bool:
        return self._has_role(Role.MENTOR)

    def is_student(self) -> bool:
        return self._has_role(Role.STUDENT)

    def _has_role(self, role: Role) -> bool:
        user = self.current_user
        return user is not None and user.role == role

    def _authenticate(self, username: str, password: str) -> User | None:
        for cred in FIXED_CREDENTIALS:
            if username == cred.username and password == cred.password:
                # целевой пользователь мог быть удалён из реестра
                return self.registry.find_first(cred.matches)
        user = self.registry.find_by_login(username)
        if user is not None and password == DEMO_PASSWORD:
            return user
        return None

    def _has_storage(self) -> bool:
        return self.storage is not None and self.codec is not None

    def _persist(self, user: User) -> None:
        if self._has_storage():
            self.storage.set_item(STORAGE_KEY, self.codec.encode(user))

    def _set(self, session: Session) -> None:
        self._session = session
        for listener in list(self._listeners):
            listener(session)
