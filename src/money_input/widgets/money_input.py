"""Money input widget that formats the amount as the user types."""

from __future__ import annotations

from textual import on
from textual.message import Message
from textual.widgets import Input
from textual.widgets.input import Selection

from money_input.formatter import MoneyInputFormatter
from money_input.models import EditValue


class MoneyInput(Input):
    """An Input that keeps its value in canonical money form while typing.

    Every change to the value is passed through
    :meth:`MoneyInputFormatter.reconcile` together with the last committed
    value, so thousand separators appear as digits are typed and the cursor
    stays next to the digit being edited.
    """

    class Amount(Message):
        """Posted when a formatted value has been committed."""

        def __init__(self, money_input: MoneyInput, value: str, number: float) -> None:
            super().__init__()
            self.money_input = money_input
            self.value = value
            self.number = number

        @property
        def control(self) -> MoneyInput:
            """The MoneyInput that posted the message."""
            return self.money_input

    def __init__(
        self,
        formatter: MoneyInputFormatter | None = None,
        *,
        decimal_separator: str = ",",
        thousand_separator: str = ".",
        precision: int = 2,
        **kwargs,
    ) -> None:
        """Initialize with a formatter and a placeholder matching its precision.

        Args:
            formatter: Formatter to use; built from the separator and
                precision arguments when omitted.
            decimal_separator: Character separating the decimal digits.
            thousand_separator: Character separating the thousands.
            precision: Number of decimals allowed.
            **kwargs: Passed through to ``Input``.
        """
        if formatter is None:
            formatter = MoneyInputFormatter(
                decimal_separator=decimal_separator,
                thousand_separator=thousand_separator,
                precision=precision,
            )
        self.formatter = formatter
        self._committed = EditValue.empty()
        placeholder = "0"
        if formatter.precision:
            placeholder += formatter.decimal_separator + "0" * formatter.precision
        kwargs.setdefault("placeholder", placeholder)
        super().__init__(**kwargs)

    @property
    def number_value(self) -> float:
        """The numeric value of the current text, 0.0 if it has none."""
        return self.formatter.number_value(self.value)

    def watch_selection(self, selection: Selection) -> None:
        """Track cursor moves that are not part of an edit."""
        if self.value == self._committed.text:
            self._committed = EditValue(self._committed.text, selection.end)

    @on(Input.Changed)
    def _reformat(self, event: Input.Changed) -> None:
        """Reconcile the edited value against the last committed one."""
        if event.input is not self or self.value == self._committed.text:
            return

        proposed = EditValue(self.value, self.cursor_position)
        result = self.formatter.reconcile(self._committed, proposed)
        self._committed = result

        if result.text != self.value:
            self.value = result.text
        if result.cursor is not None and result.cursor != self.cursor_position:
            self.cursor_position = result.cursor

        self.post_message(
            self.Amount(self, result.text, self.formatter.number_value(result.text))
        )
