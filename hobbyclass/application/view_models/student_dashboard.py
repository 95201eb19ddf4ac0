from __future__ import annotations

import enum
from typing import Iterable

import structlog

from ...domain.entities import Availability, StudentClass
from ..session_store import SessionStore
from . import filters

logger = structlog.get_logger()

SPECIALIZATIONS = (
    ("all", "All Specializations"),
    ("art", "Art"),
    ("music", "Music"),
    ("dance", "Dance"),
    ("cooking", "Cooking"),
    ("technology", "Technology"),
)


class AvailabilityFilter(str, enum.Enum):
    ALL = "all"
    AVAILABLE = "available"


class StudentDashboard:
    def __init__(self, session: SessionStore, classes: Iterable[StudentClass] = ()):
        self.session = session
        self.available_classes: list[StudentClass] = list(classes)
        self.selected_specialization = filters.ALL
        self.selected_availability = AvailabilityFilter.ALL
        self.search_term = ""
        self.filtered_classes: list[StudentClass] = []
        self.apply_filters()

    def set_filters(
        self,
        specialization: str | None = None,
        availability: str | None = None,
        search: str | None = None,
    ) -> list[StudentClass]:
        if specialization is not None:
            self.selected_specialization = specialization
        if availability is not None:
            self.selected_availability = AvailabilityFilter(availability)
        if search is not None:
            self.search_term = search
        return self.apply_filters()

    def reset_filters(self) -> list[StudentClass]:
        self.selected_specialization = filters.ALL
        self.selected_availability = AvailabilityFilter.ALL
        self.search_term = ""
        return self.apply_filters()

    def apply_filters(self) -> list[StudentClass]:
        self.filtered_classes = filters.apply(
            self.available_classes,
            lambda c: filters.matches_choice(self.selected_specialization, c.category),
            self._matches_availability,
            lambda c: filters.matches_text(self.search_term, c.name, c.mentor_name),
        )
        return self.filtered_classes

    def _matches_availability(self, student_class: StudentClass) -> bool:
        if self.selected_availability == AvailabilityFilter.ALL:
            return True
        return student_class.status == Availability.AVAILABLE

    def find(self, class_id: str) -> StudentClass | None:
        return next((c for c in self.available_classes if c.id == class_id), None)

    def choose_class(self, class_id: str) -> StudentClass | None:
        student_class = self.find(class_id)
        if student_class is None:
            return None
        student_class.enrolled = True
        user = self.session.current_user
        logger.info("class_enrolled", class_id=class_id, user_id=user.id if user else None)
        return student_class

    def mentor_for_class(self, class_id: str) -> str | None:
        student_class = self.find(class_id)
        return student_class.mentor_name if student_class else None

    def stats(self) -> dict[str, int]:
        return {
            "total_classes": len(self.available_classes),
            "available_now": sum(1 for c in self.available_classes if c.status == Availability.AVAILABLE),
            "matching_search": len(self.filtered_classes),
            "enrolled": sum(1 for c in self.available_classes if c.enrolled),
        }

    def snapshot(self) -> dict:
        user = self.session.current_user
        return {
            "current_user": user.to_dict() if user else None,
            "selected_specialization": self.selected_specialization,
            "selected_availability": self.selected_availability.value,
            "search_term": self.search_term,
            "classes": [c.to_dict() for c in self.filtered_classes],
            "stats": self.stats(),
        }
