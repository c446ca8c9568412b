"""Editable static presentation data."""

from __future__ import annotations

APP_TITLE = "Destiny Bond!!!"
APP_SUBTITLE = "Crafting Heavenly Dishes & Menus!"

COURSE_COLORS: dict[str, str] = {
    "starter": "#6907bf",
    "main meal": "#620bcd",
    "dessert": "#6504ab",
}
FALLBACK_COURSE_COLOR = "#FF6B6B"

MISSING_FIELD_MESSAGE = "Please fill in all fields"
INVALID_PRICE_MESSAGE = "Please enter a valid price below 100"
INVALID_COURSE_MESSAGE = "Please select a course"
ITEM_ADDED_MESSAGE = "Menu item added successfully!"

EMPTY_MENU_TITLE = "No menu items yet."
EMPTY_MENU_HINT = "Start by adding some delicious dishes!"
