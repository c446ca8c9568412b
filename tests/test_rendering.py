"""Unit tests for menu rendering helpers."""

from decimal import Decimal

from chef_menu.constant import EMPTY_MENU_HINT, EMPTY_MENU_TITLE
from chef_menu.models import Course, MenuItem
from chef_menu.rendering import badge_style, format_course_badge, format_menu, format_menu_item, format_total


def make_item(name: str, course: Course = Course.STARTER, description: str = "desc") -> MenuItem:
    return MenuItem(f"id-{name}", name, description, course, Decimal("8.50"))


def test_badge_uses_course_color():
    assert badge_style(Course.DESSERT) == "bold #ffffff on #6504ab"
    assert format_course_badge(Course.MAIN_MEAL).plain == " Main meal "


def test_menu_item_card_lists_every_field():
    item = make_item("Soup", Course.STARTER, "Tomato soup\nwith basil")
    plain = format_menu_item(item).plain
    assert "Soup" in plain
    assert "$8.50" in plain
    assert "Tomato soup" in plain
    assert "with basil" in plain
    assert "Starter" in plain


def test_empty_menu_shows_hint():
    plain = format_menu([]).plain
    assert EMPTY_MENU_TITLE in plain
    assert EMPTY_MENU_HINT in plain


def test_menu_keeps_item_order():
    plain = format_menu([make_item("Soup"), make_item("Cake", Course.DESSERT)]).plain
    assert EMPTY_MENU_TITLE not in plain
    assert plain.index("Soup") < plain.index("Cake")


def test_total():
    assert format_total(3).plain == "Total Items: 3"
