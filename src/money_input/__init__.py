"""Money-formatted text input for Textual."""

from money_input.errors import InvalidConfiguration
from money_input.formatter import MoneyInputFormatter
from money_input.models import EditKind, EditValue, FormatterConfig

__all__ = [
    "EditKind",
    "EditValue",
    "FormatterConfig",
    "InvalidConfiguration",
    "MoneyInputFormatter",
]
