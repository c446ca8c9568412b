"""Domain models for the chef menu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Course(Enum):
    """Fixed course categories a dish can belong to."""

    STARTER = "starter"
    MAIN_MEAL = "main meal"
    DESSERT = "dessert"

    @property
    def label(self) -> str:
        """Display label with a capitalized first letter."""
        return self.value[:1].upper() + self.value[1:]

    @classmethod
    def parse(cls, raw: Course | str | None) -> Course:
        """Resolve a course from a member, its value or its name.

        Empty input falls back to STARTER. Unknown text raises ValueError.
        """
        if isinstance(raw, cls):
            return raw
        text = (raw or "").strip().lower().replace("_", " ")
        if not text:
            return cls.STARTER
        for course in cls:
            if text == course.value:
                return course
        raise ValueError(f"Unknown course: {raw!r}")


@dataclass(frozen=True)
class MenuItem:
    """An admitted menu item."""

    item_id: str
    name: str
    description: str
    course: Course
    price: Decimal

    @property
    def display_price(self) -> str:
        return f"${self.price}"


@dataclass
class MenuDraft:
    """Pending form input that has not been validated yet."""

    name: str = ""
    description: str = ""
    course: Course = Course.STARTER
    price_text: str = ""

    def reset(self) -> None:
        """Restore every field to its default value."""
        self.name = ""
        self.description = ""
        self.course = Course.STARTER
        self.price_text = ""
