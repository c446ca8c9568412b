"""Validation errors raised while admitting menu items."""

from __future__ import annotations

from chef_menu.constant import INVALID_COURSE_MESSAGE, INVALID_PRICE_MESSAGE, MISSING_FIELD_MESSAGE


class MenuValidationError(ValueError):
    """Base error for a rejected draft; `message` is safe to show the chef."""

    default_message = "Invalid menu item"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldError(MenuValidationError):
    """A required text field is empty after trimming."""

    default_message = MISSING_FIELD_MESSAGE


class InvalidPriceError(MenuValidationError):
    """Price text is not a number or falls outside the admissible range."""

    default_message = INVALID_PRICE_MESSAGE


class InvalidCourseError(MenuValidationError):
    """Course is not one of the fixed course categories."""

    default_message = INVALID_COURSE_MESSAGE
