"""Textual widgets for money entry."""

from money_input.widgets.money_input import MoneyInput

__all__ = ["MoneyInput"]
