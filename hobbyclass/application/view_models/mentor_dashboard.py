from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

import structlog

from ...domain.entities import ClassStatus, MentorClass
from ..dto import NewMentorClass
from ..session_store import SessionStore
from . import filters

logger = structlog.get_logger()

EDITABLE_FIELDS = frozenset(
    f for f in MentorClass.__dataclass_fields__ if f not in ("id", "current_students")
)


class MentorDashboard:
    """A mentor's own classes.

    Counters are always derived from ``classes``; nothing is incremented
    next to a mutation.
    """

    def __init__(self, session: SessionStore, classes: Iterable[MentorClass] = ()):
        self.session = session
        self.classes: list[MentorClass] = list(classes)
        self.search_term = ""
        self.status_filter = filters.ALL
        self.filtered_classes: list[MentorClass] = []
        self._next_id = max((int(c.id) for c in self.classes if c.id.isdigit()), default=0) + 1
        self.update_filtered_classes()

    def set_filters(self, search: str | None = None, status: str | None = None) -> list[MentorClass]:
        if search is not None:
            self.search_term = search
        if status is not None:
            self.status_filter = status if status == filters.ALL else ClassStatus(status).value
        return self.update_filtered_classes()

    def update_filtered_classes(self) -> list[MentorClass]:
        self.filtered_classes = filters.apply(
            self.classes,
            lambda c: filters.matches_text(self.search_term, c.title, c.category),
            lambda c: filters.matches_choice(self.status_filter, c.status.value),
        )
        return self.filtered_classes

    def refresh(self) -> list[MentorClass]:
        return self.update_filtered_classes()

    def find(self, class_id: str) -> MentorClass | None:
        return next((c for c in self.classes if c.id == class_id), None)

    def add_class(self, data: NewMentorClass) -> MentorClass | None:
        if not data.title or not data.category:
            return None
        mentor_class = MentorClass(id=str(self._next_id), current_students=0, **asdict(data))
        mentor_class.status = ClassStatus(mentor_class.status)
        self._next_id += 1
        self.classes.append(mentor_class)
        self.update_filtered_classes()
        logger.info("class_added", class_id=mentor_class.id, title=mentor_class.title)
        return mentor_class

    def update_class(self, class_id: str, **changes) -> MentorClass | None:
        mentor_class = self.find(class_id)
        if mentor_class is None:
            return None
        # сначала проверяем всё, чтобы ошибка не оставила класс изменённым наполовину
        for name in changes:
            if name not in EDITABLE_FIELDS:
                raise ValueError(f"Field {name!r} is not editable")
        if "status" in changes:
            changes["status"] = ClassStatus(changes["status"])
        for name, value in changes.items():
            setattr(mentor_class, name, value)
        self.update_filtered_classes()
        return mentor_class

    def delete_class(self, class_id: str) -> bool:
        mentor_class = self.find(class_id)
        if mentor_class is None:
            return False
        self.classes.remove(mentor_class)
        self.update_filtered_classes()
        logger.info("class_deleted", class_id=class_id)
        return True

    def activate_class(self, class_id: str) -> MentorClass | None:
        return self._set_status(class_id, ClassStatus.ACTIVE)

    def deactivate_class(self, class_id: str) -> MentorClass | None:
        mentor_class = self.find(class_id)
        # деактивировать можно только активный класс
        if mentor_class is None or mentor_class.status != ClassStatus.ACTIVE:
            return mentor_class
        return self._set_status(class_id, ClassStatus.INACTIVE)

    def _set_status(self, class_id: str, status: ClassStatus) -> MentorClass | None:
        mentor_class = self.find(class_id)
        if mentor_class is None:
            return None
        if mentor_class.status != status:
            mentor_class.status = status
            self.update_filtered_classes()
            logger.info("class_status_changed", class_id=class_id, status=status.value)
        return mentor_class

    def stats(self) -> dict[str, int]:
        return {
            "total_classes": len(self.classes),
            "active_classes": sum(1 for c in self.classes if c.status == ClassStatus.ACTIVE),
            "students_enrolled": sum(c.current_students for c in self.classes),
        }

    def snapshot(self) -> dict:
        user = self.session.current_user
        return {
            "current_user": user.to_dict() if user else None,
            "search_term": self.search_term,
            "status_filter": self.status_filter,
            "classes": [c.to_dict() for c in self.filtered_classes],
            "stats": self.stats(),
        }
