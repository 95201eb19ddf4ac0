"""Pure predicates shared by the dashboard filters."""
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

ALL = "all"


def matches_text(term: str | None, *fields: str) -> bool:
    """Case-insensitive substring match on any field; empty term matches."""
    if not term:
        return True
    needle = term.lower()
    return any(needle in (f or "").lower() for f in fields)


def matches_choice(selected: str | None, value: str) -> bool:
    """Equality unless nothing (or ``all``) is selected."""
    if not selected or selected == ALL:
        return True
    return value.lower() == selected.lower()


def apply(items: Iterable[T], *predicates: Callable[[T], bool]) -> list[T]:
    return [item for item in items if all(p(item) for p in predicates)]
