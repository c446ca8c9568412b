"""Shared pytest fixtures for the chef menu tests."""

import pytest

from chef_menu.catalog import MenuCatalog
from chef_menu.models import Course, MenuDraft


@pytest.fixture(autouse=True)
def debug_log_file(tmp_path, monkeypatch):
    """Send debug log lines to a per-test file instead of /tmp."""
    path = tmp_path / "chef-menu-debug.log"
    monkeypatch.setenv("CHEF_MENU_DEBUG_LOG", str(path))
    return path


@pytest.fixture
def catalog() -> MenuCatalog:
    """Fixture providing an empty catalog."""
    return MenuCatalog()


@pytest.fixture
def soup_draft() -> MenuDraft:
    """Fixture providing a complete, valid draft."""
    return MenuDraft(name="Soup", description="Tomato soup", course=Course.STARTER, price_text="8.5")
