from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable

import structlog

from ..domain.entities import Role, UserStatus, User
from .dto import NewUser

logger = structlog.get_logger()

UPDATABLE_FIELDS = frozenset({"name", "email", "role", "status"})


class UserRegistry:
    """In-memory collection of user records.

    Ids come from a monotonic counter seeded past the highest initial id,
    so an empty registry starts at 1 and deleted ids are never handed out
    again.
    """

    def __init__(self, users: Iterable[User] = ()):
        self._users: list[User] = list(users)
        self._next_id = max((u.id for u in self._users), default=0) + 1

    def list(self) -> list[User]:
        return list(self._users)

    def find(self, user_id: int) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def find_first(self, predicate: Callable[[User], bool]) -> User | None:
        return next((u for u in self._users if predicate(u)), None)

    def find_by_email(self, email: str) -> User | None:
        return self.find_first(lambda u: u.email == email)

    def find_by_login(self, identifier: str) -> User | None:
        # email сравнивается как есть, имя без учёта регистра
        lowered = identifier.lower()
        return self.find_first(lambda u: u.email == identifier or u.name.lower() == lowered)

    def add(self, data: NewUser) -> User:
        user = User(
            id=self._next_id,
            name=data.name,
            email=data.email,
            role=Role(data.role),
            status=UserStatus(data.status),
        )
        self._next_id += 1
        self._users.append(user)
        logger.info("user_added", user_id=user.id, role=user.role.value)
        return user

    def delete(self, user_id: int) -> bool:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                del self._users[index]
                logger.info("user_deleted", user_id=user_id)
                return True
        return False

    def update(self, user_id: int, **changes) -> User | None:
        index = next((i for i, u in enumerate(self._users) if u.id == user_id), None)
        if index is None:
            return None
        changes.pop("id", None)
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown user fields: {', '.join(sorted(unknown))}")
        if "role" in changes:
            changes["role"] = Role(changes["role"])
        if "status" in changes:
            changes["status"] = UserStatus(changes["status"])
        updated = replace(self._users[index], **changes)
        self._users[index] = updated
        logger.info("user_updated", user_id=user_id, fields=sorted(changes))
        return updated

    def __len__(self) -> int:
        return len(self._users)
