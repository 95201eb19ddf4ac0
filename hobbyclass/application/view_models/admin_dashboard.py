from __future__ import annotations

from ...domain.entities import Role, User, UserStatus
from ..dto import NewUser
from ..session_store import SessionStore
from ..user_registry import UserRegistry
from . import filters


class AdminDashboard:
    """User management screen: registry listing with role and text filters."""

    def __init__(self, session: SessionStore, registry: UserRegistry):
        self.session = session
        self.registry = registry
        self.selected_role = ""
        self.search_term = ""
        self.users: list[User] = []
        self.filtered_users: list[User] = []
        self.load_users()

    def load_users(self) -> None:
        self.users = self.registry.list()
        self.filter_users()

    def set_filters(self, role: str | None = None, search: str | None = None) -> list[User]:
        if role is not None:
            self.selected_role = role
        if search is not None:
            self.search_term = search
        return self.filter_users()

    def filter_users(self) -> list[User]:
        self.filtered_users = filters.apply(
            self.users,
            lambda u: filters.matches_choice(self.selected_role, u.role.value),
            lambda u: filters.matches_text(self.search_term, u.name, u.email),
        )
        return self.filtered_users

    def add_user(self, data: NewUser) -> User:
        user = self.registry.add(data)
        self.load_users()
        return user

    def update_user(self, user_id: int, **changes) -> User | None:
        user = self.registry.update(user_id, **changes)
        if user is not None:
            self.load_users()
        return user

    def delete_user(self, user_id: int) -> bool:
        removed = self.registry.delete(user_id)
        if removed:
            self.load_users()
        return removed

    def stats(self) -> dict[str, int]:
        users = self.registry.list()
        counts = {f"{role.value}s": sum(1 for u in users if u.role == role) for role in Role}
        counts["total"] = len(users)
        counts["active"] = sum(1 for u in users if u.status == UserStatus.ACTIVE)
        return counts

    def snapshot(self) -> dict:
        self.load_users()
        return {
            "current_user": self.session.current_user.to_dict() if self.session.current_user else None,
            "selected_role": self.selected_role,
            "search_term": self.search_term,
            "users": [u.to_dict() for u in self.filtered_users],
            "stats": self.stats(),
        }
