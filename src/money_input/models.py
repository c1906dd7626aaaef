"""Data models for formatter configuration and text-field edits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from money_input.errors import InvalidConfiguration


class EditKind(Enum):
    """How a proposed edit is interpreted."""

    MONEY = "money"
    CALCULATION = "calculation"


@dataclass(frozen=True)
class FormatterConfig:
    """Separators and precision used to format a money value.

    Raises:
        InvalidConfiguration: If the separators are equal or not single
            characters, or if the precision is negative.
    """

    decimal_separator: str = ","
    thousand_separator: str = "."
    precision: int = 2

    def __post_init__(self) -> None:
        for name in ("decimal_separator", "thousand_separator"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise InvalidConfiguration(
                    f"{name} must be a single character, got {value!r}"
                )
        if self.decimal_separator == self.thousand_separator:
            raise InvalidConfiguration(
                "decimal_separator cannot be the same as thousand_separator"
            )
        if (
            isinstance(self.precision, bool)
            or not isinstance(self.precision, int)
            or self.precision < 0
        ):
            raise InvalidConfiguration(
                f"precision must be a non-negative integer, got {self.precision!r}"
            )


@dataclass(frozen=True)
class EditValue:
    """A snapshot of a text field: its text and the collapsed cursor offset.

    A cursor of ``None`` means the field has no selection.
    """

    text: str
    cursor: int | None = None

    @classmethod
    def empty(cls) -> EditValue:
        """Return an empty value with the cursor at the start."""
        return cls("", 0)

    @classmethod
    def at_end(cls, text: str) -> EditValue:
        """Return a value with the cursor placed after the last character."""
        return cls(text, len(text))
