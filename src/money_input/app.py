"""Demo Textual application for money-input."""

from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from money_input.formatter import MoneyInputFormatter
from money_input.models import FormatterConfig
from money_input.widgets.money_input import MoneyInput

_FOOTER_TEXT = "\\[Esc] Quit"


class MoneyInputApp(App):
    """A single money field with a live view of its numeric value."""

    TITLE = "money-input"

    CSS = """
    #amount-input {
        margin: 1 2;
    }
    #value-bar, #footer-bar {
        padding: 0 2;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Quit"),
    ]

    def __init__(self, config: FormatterConfig | None = None) -> None:
        """Initialize the app.

        Args:
            config: Formatter configuration; defaults are used when omitted.
        """
        super().__init__()
        self.config = config or FormatterConfig()
        self.amount = 0.0

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        yield MoneyInput(MoneyInputFormatter.from_config(self.config), id="amount-input")
        yield Static(self._value_text(0.0), id="value-bar")
        yield Static(_FOOTER_TEXT, id="footer-bar")

    def on_mount(self) -> None:
        """Focus the amount field on startup."""
        self.query_one("#amount-input", MoneyInput).focus()

    def _value_text(self, number: float) -> str:
        return f"Value: {number:.{self.config.precision}f}"

    @on(MoneyInput.Amount)
    def _show_value(self, event: MoneyInput.Amount) -> None:
        """Show the numeric value of the committed amount."""
        self.amount = event.number
        self.query_one("#value-bar", Static).update(self._value_text(event.number))
