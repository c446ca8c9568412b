"""Main Textual app class."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, ContentSwitcher, Header, Input, Static, TextArea

from chef_menu.alert_modal import AlertModal
from chef_menu.catalog import MenuCatalog, course_color
from chef_menu.constant import APP_SUBTITLE, APP_TITLE, ITEM_ADDED_MESSAGE
from chef_menu.debug_log import log_debug
from chef_menu.errors import MenuValidationError
from chef_menu.models import Course
from chef_menu.rendering import format_menu, format_total

FORM_VIEW = "form-view"
MENU_VIEW = "menu-view"


def course_button_id(course: Course) -> str:
    return f"course-{course.name.lower()}"


class ChefMenuApp(App):
    """A Textual app for adding dishes to a chef's menu and browsing it."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    CSS = """
    Screen {
        layout: vertical;
    }

    #tab-bar {
        height: 3;
    }

    .tab {
        width: 1fr;
    }

    .tab.active {
        background: $primary;
        text-style: bold;
    }

    #views {
        height: 1fr;
    }

    #form-view {
        border: round $primary;
        padding: 0 1;
    }

    #menu-view {
        border: round $secondary;
        padding: 0 1;
    }

    #description {
        height: 6;
    }

    #course-buttons {
        height: 3;
        margin-bottom: 1;
    }

    .course-button {
        width: 1fr;
    }

    .course-button.selected {
        color: #ffffff;
        text-style: bold;
    }

    #add-item {
        width: 100%;
        margin-top: 1;
    }

    #menu-total {
        margin-bottom: 1;
    }

    #menu-scroll {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "add_item", "Add to Menu", priority=True),
        Binding("f1", "show_form", "Add Item", priority=True),
        Binding("f2", "show_menu", "View Menu", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.catalog = MenuCatalog()
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="tab-bar"):
            yield Button("Add Item", id="tab-form", classes="tab active")
            yield Button("View Menu (0)", id="tab-menu", classes="tab")
        with ContentSwitcher(initial=FORM_VIEW, id="views"):
            with VerticalScroll(id=FORM_VIEW):
                yield Static("Add New Menu Item", classes="section-title")
                yield Input(placeholder="Dish Name", id="dish-name")
                yield TextArea(id="description")
                yield Static("Select Course:")
                with Horizontal(id="course-buttons"):
                    for course in Course:
                        yield Button(course.label, id=course_button_id(course), classes="course-button")
                yield Input(placeholder="Price", id="price")
                yield Button("Add to Menu", id="add-item", variant="primary")
            with Vertical(id=MENU_VIEW):
                yield Static("Chef's Menu", classes="section-title")
                yield Static(id="menu-total")
                with VerticalScroll(id="menu-scroll"):
                    yield Static(id="menu-list")

    def on_mount(self) -> None:
        self.query_one("#description", TextArea).border_title = "Description"
        self._refresh_all()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "dish-name":
            self.catalog.set_name(event.value)
        elif event.input.id == "price":
            self.catalog.set_price_text(event.value)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id == "description":
            self.catalog.set_description(event.text_area.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "add-item":
            self.action_add_item()
        elif button_id == "tab-form":
            self.action_show_form()
        elif button_id == "tab-menu":
            self.action_show_menu()
        elif button_id.startswith("course-"):
            self.catalog.set_course(button_id[len("course-") :])
            self._refresh_course_buttons()

    def action_add_item(self) -> None:
        if isinstance(self.screen, AlertModal):
            return

        draft = self.catalog.draft
        log_debug(f"submit_enter course={draft.course.value!r} price_text={draft.price_text!r}")
        try:
            item = self.catalog.submit_draft()
        except MenuValidationError as exc:
            log_debug(f"submit_rejected reason={type(exc).__name__}")
            self.push_screen(AlertModal("Error", exc.message, is_error=True))
            return

        log_debug(f"submit_admitted item_id={item.item_id} count={self.catalog.item_count()}")
        self._clear_form()
        self._refresh_all()
        self.push_screen(AlertModal("Success", ITEM_ADDED_MESSAGE))

    def action_show_form(self) -> None:
        self._switch_view(FORM_VIEW)

    def action_show_menu(self) -> None:
        self._switch_view(MENU_VIEW)
        self._refresh_menu()

    def _switch_view(self, view_id: str) -> None:
        if isinstance(self.screen, AlertModal):
            return
        self.query_one("#views", ContentSwitcher).current = view_id
        self.query_one("#tab-form", Button).set_class(view_id == FORM_VIEW, "active")
        self.query_one("#tab-menu", Button).set_class(view_id == MENU_VIEW, "active")

    def _clear_form(self) -> None:
        self.query_one("#dish-name", Input).value = ""
        self.query_one("#description", TextArea).load_text("")
        self.query_one("#price", Input).value = ""

    def _refresh_all(self) -> None:
        self._refresh_course_buttons()
        self._refresh_menu()

    def _refresh_course_buttons(self) -> None:
        selected = self.catalog.draft.course
        for course in Course:
            button = self.query_one(f"#{course_button_id(course)}", Button)
            is_selected = course is selected
            button.set_class(is_selected, "selected")
            button.styles.background = course_color(course) if is_selected else None

    def _refresh_menu(self) -> None:
        try:
            menu_list = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        count = self.catalog.item_count()
        menu_list.update(format_menu(self.catalog.list_items()))
        self.query_one("#menu-total", Static).update(format_total(count))
        self.query_one("#tab-menu", Button).label = f"View Menu ({count})"
