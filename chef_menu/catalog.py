"""In-memory menu catalog and item admission rules."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from uuid import uuid4

from chef_menu.config import PRICE_LIMIT, PRICE_MIN, PRICE_QUANTUM
from chef_menu.constant import COURSE_COLORS, FALLBACK_COURSE_COLOR
from chef_menu.errors import InvalidCourseError, InvalidPriceError, MissingFieldError
from chef_menu.models import Course, MenuDraft, MenuItem

# Plain ASCII decimal notation only; no digit separators or non-ASCII digits.
_PRICE_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def course_color(course: object) -> str:
    """Return the color token for a course, or the fallback for anything else."""
    key = course.value if isinstance(course, Course) else course
    if not isinstance(key, str):
        return FALLBACK_COURSE_COLOR
    return COURSE_COLORS.get(key.strip().lower().replace("_", " "), FALLBACK_COURSE_COLOR)


def parse_price(price_text: str) -> Decimal:
    """Parse price text into a two-place Decimal within [PRICE_MIN, PRICE_LIMIT)."""
    text = price_text.strip()
    if not _PRICE_PATTERN.fullmatch(text):
        raise InvalidPriceError()
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise InvalidPriceError() from None

    if not value.is_finite():
        raise InvalidPriceError()
    if not (PRICE_MIN <= value < PRICE_LIMIT):
        raise InvalidPriceError()
    # 99.995 rounds up to the limit itself.
    price = value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if price >= PRICE_LIMIT:
        raise InvalidPriceError()
    if price.is_zero():
        return PRICE_MIN.quantize(PRICE_QUANTUM)
    return price


def build_menu_item(draft: MenuDraft) -> MenuItem:
    """Validate a draft and build a new item; first failing rule wins."""
    name = draft.name.strip()
    description = draft.description.strip()
    price_text = draft.price_text.strip()
    if not name or not description or not price_text:
        raise MissingFieldError()

    price = parse_price(price_text)
    try:
        course = Course.parse(draft.course)
    except ValueError:
        raise InvalidCourseError() from None
    return MenuItem(
        item_id=uuid4().hex,
        name=name,
        description=description,
        course=course,
        price=price,
    )


class MenuCatalog:
    """Append-only list of admitted menu items plus the pending draft."""

    course_color = staticmethod(course_color)

    def __init__(self) -> None:
        self.draft = MenuDraft()
        self._items: list[MenuItem] = []

    def set_name(self, value: str) -> None:
        self.draft.name = value

    def set_description(self, value: str) -> None:
        self.draft.description = value

    def set_course(self, value: Course | str | None) -> None:
        self.draft.course = Course.parse(value)

    def set_price_text(self, value: str) -> None:
        self.draft.price_text = value

    def submit_draft(self, draft: MenuDraft | None = None) -> MenuItem:
        """
        Admit a draft (the catalog's own by default) and append the new item.

        Raises a MenuValidationError subclass and leaves both the draft and
        the catalog untouched when the draft is rejected. The submitted draft
        is reset only after a successful admission.
        """
        source = self.draft if draft is None else draft
        item = build_menu_item(source)
        self._items.append(item)
        source.reset()
        return item

    def list_items(self) -> tuple[MenuItem, ...]:
        """Return the admitted items in insertion order."""
        return tuple(self._items)

    def item_count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items
