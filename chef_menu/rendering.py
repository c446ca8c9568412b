"""Rendering helpers for menu items and course tags."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text

from chef_menu.catalog import course_color
from chef_menu.constant import EMPTY_MENU_HINT, EMPTY_MENU_TITLE
from chef_menu.models import Course, MenuItem


def badge_style(course: Course) -> str:
    return f"bold #ffffff on {course_color(course)}"


def format_course_badge(course: Course) -> Text:
    """Render a course as a colored tag."""
    return Text(f" {course.label} ", style=badge_style(course))


def format_menu_item(item: MenuItem) -> Text:
    """Render one menu card: name and price, description, course tag."""
    text = Text()
    text.append("▍", style=course_color(item.course))
    text.append(item.name, style="bold")
    text.append("  ")
    text.append(item.display_price, style="bold green")
    for line in item.description.splitlines():
        text.append("\n▍", style=course_color(item.course))
        text.append(line, style="dim")
    text.append("\n▍", style=course_color(item.course))
    text.append_text(format_course_badge(item.course))
    return text


def format_menu(items: Iterable[MenuItem]) -> Text:
    """Render the full menu list, or the empty state when there is nothing yet."""
    lines = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            lines.append("\n\n")
        lines.append_text(format_menu_item(item))

    if not lines.plain:
        lines.append(EMPTY_MENU_TITLE, style="bold")
        lines.append(f"\n{EMPTY_MENU_HINT}", style="dim")
    return lines


def format_total(count: int) -> Text:
    text = Text("Total Items: ")
    text.append(str(count), style="bold")
    return text
