"""Entry point for the chef menu Textual app."""

from __future__ import annotations

from chef_menu.chef_app import ChefMenuApp


def main() -> None:
    """Run the Textual application."""
    ChefMenuApp().run()


if __name__ == "__main__":
    main()
