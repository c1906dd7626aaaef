"""Keystroke-level formatting of money amounts with stable cursor placement.

The formatter turns a proposed text-field edit into the canonical money form
(grouped integer digits and a limited fractional part) and keeps the cursor
next to the digit the user was editing.
"""

from __future__ import annotations

import logging
import math
import re

from money_input.models import EditKind, EditValue, FormatterConfig

logger = logging.getLogger(__name__)

# Characters that mark a calculator expression rather than a money value.
_CALCULATION_CHARS = frozenset("-+()*/")

_NON_DIGIT_RE = re.compile(r"\D")


def classify_edit(text: str) -> EditKind:
    """Tell a calculator expression apart from a money value.

    Args:
        text: The proposed field text.

    Returns:
        ``EditKind.CALCULATION`` if the text contains any of ``- + ( ) * /``,
        otherwise ``EditKind.MONEY``.
    """
    if any(char in _CALCULATION_CHARS for char in text):
        return EditKind.CALCULATION
    return EditKind.MONEY


def normalize_calculation(text: str) -> str:
    """Clean up a calculator expression: drop ``--``, fold ``+-`` and remove spaces."""
    return text.replace("--", "").replace("+-", "-").replace(" ", "")


def logical_offset(text: str, offset: int, grouping_char: str) -> int:
    """Convert a character offset into an offset that ignores grouping characters.

    Args:
        text: The text the offset points into.
        offset: Character offset, clamped to ``[0, len(text)]``.
        grouping_char: The thousand separator.

    Returns:
        The number of non-grouping characters before the offset.
    """
    offset = max(0, min(offset, len(text)))
    return offset - text.count(grouping_char, 0, offset)


def char_offset(text: str, logical: int, grouping_char: str) -> int:
    """Convert a logical offset back into a character offset within *text*.

    Walks *text* counting non-grouping characters until *logical* of them have
    been passed, then adds back the grouping characters seen along the way.
    The result is not clamped: a logical offset past the end of *text* yields
    an offset past ``len(text)``.

    Args:
        text: The formatted text.
        logical: Offset in non-grouping characters.
        grouping_char: The thousand separator.

    Returns:
        The character offset in *text*.
    """
    if logical <= 0:
        return 0
    separators = 0
    seen = 0
    for char in text:
        if char == grouping_char:
            separators += 1
            continue
        seen += 1
        if seen == logical:
            break
    return logical + separators


class MoneyInputFormatter:
    """Format money text as the user types it.

    Digits of the integer part are grouped with ``thousand_separator`` and the
    fractional part after ``decimal_separator`` holds at most ``precision``
    characters.
    """

    def __init__(
        self,
        decimal_separator: str = ",",
        thousand_separator: str = ".",
        precision: int = 2,
    ) -> None:
        """Initialize the formatter.

        Args:
            decimal_separator: Character separating the decimal digits.
            thousand_separator: Character separating the thousands.
            precision: Number of decimals allowed.

        Raises:
            InvalidConfiguration: If the configuration is not usable.
        """
        self.config = FormatterConfig(
            decimal_separator=decimal_separator,
            thousand_separator=thousand_separator,
            precision=precision,
        )

    @classmethod
    def from_config(cls, config: FormatterConfig) -> MoneyInputFormatter:
        """Build a formatter from an existing configuration."""
        return cls(
            decimal_separator=config.decimal_separator,
            thousand_separator=config.thousand_separator,
            precision=config.precision,
        )

    @property
    def decimal_separator(self) -> str:
        return self.config.decimal_separator

    @property
    def thousand_separator(self) -> str:
        return self.config.thousand_separator

    @property
    def precision(self) -> int:
        return self.config.precision

    # ------------------------------------------------------------------
    # Masking
    # ------------------------------------------------------------------

    def split_decimal(self, raw: str) -> tuple[str, str]:
        """Split *raw* into its integer part and its decimal part.

        The decimal part is the segment between the first and the second
        decimal separator, or empty when there is no separator.
        """
        parts = raw.split(self.decimal_separator)
        integer_part = parts[0]
        decimal_part = parts[1] if len(parts) > 1 else ""
        return integer_part, decimal_part

    @staticmethod
    def collapse_leading_zero(digits: str) -> str:
        """Drop one leading zero typed in front of other digits (``"01"`` -> ``"1"``).

        The zero is removed from the digit string before grouping, so a
        4-digit input such as ``"0123"`` becomes ``"123"`` and never starts
        with a separator.
        """
        if digits.startswith("0") and len(digits) > 1:
            return digits[1:]
        return digits

    def group_thousands(self, digits: str) -> str:
        """Insert the thousand separator between groups of 3 digits from the right."""
        head = len(digits) % 3 or 3
        groups = [digits[:head]]
        groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
        return self.thousand_separator.join(groups)

    def limit_precision(self, decimal_part: str, raw: str) -> str:
        """Keep the decimal part within ``precision`` characters.

        When the decimal part overflows, the last allowed character is
        replaced by the last character of *raw*, i.e. the newest typed digit
        wins over the one already in place.  With a precision of 0 there is
        no room for a fractional part at all.

        Args:
            decimal_part: The fractional characters after the separator.
            raw: The complete unformatted text.

        Returns:
            The decimal part, at most ``precision`` characters long.
        """
        if len(decimal_part) <= self.precision:
            return decimal_part
        if self.precision == 0:
            return ""
        return decimal_part[: self.precision - 1] + raw[-1]

    def apply_mask(self, raw: str) -> str:
        """Format *raw* into the canonical money representation.

        Args:
            raw: Arbitrary text, e.g. ``"1234567,5"``.

        Returns:
            The masked text, e.g. ``"1.234.567,5"``.  Malformed input yields an
            empty or partial result.
        """
        integer_part, decimal_part = self.split_decimal(raw)

        digits = _NON_DIGIT_RE.sub("", integer_part)
        digits = self.collapse_leading_zero(digits)
        grouped = self.group_thousands(digits)

        decimal_part = self.limit_precision(decimal_part, raw)
        if decimal_part == "0":
            decimal_part = ""

        if decimal_part:
            result = f"{grouped}{self.decimal_separator}{decimal_part}"
        else:
            result = grouped

        if result.endswith(self.decimal_separator) and not decimal_part:
            result = result[:-1]

        return result

    # ------------------------------------------------------------------
    # Numeric value
    # ------------------------------------------------------------------

    def number_value(self, masked: str) -> float:
        """Return the best-effort numeric value of a masked string.

        Args:
            masked: Text as produced by :meth:`apply_mask`.

        Returns:
            The parsed value, or ``0.0`` if the text is empty or cannot be
            parsed into a finite number.
        """
        if not masked:
            return 0.0

        text = (
            masked.replace(self.thousand_separator, "")
            .replace(self.decimal_separator, ".", 1)
            .replace(",", ".", 1)
        )
        try:
            value = float(text)
        except ValueError:
            return 0.0
        if not math.isfinite(value):
            return 0.0
        return value

    # ------------------------------------------------------------------
    # Edit reconciliation
    # ------------------------------------------------------------------

    def _reconcile_calculation(self, proposed: EditValue) -> EditValue:
        """Clean a calculator expression without applying the money mask."""
        cleaned = normalize_calculation(proposed.text)
        if cleaned == proposed.text:
            return proposed

        removed = len(proposed.text) - len(cleaned)
        cursor = proposed.cursor
        if cursor is not None:
            cursor = max(0, min(cursor - removed, len(cleaned)))
        logger.debug("calculation edit %r -> %r", proposed.text, cleaned)
        return EditValue(cleaned, cursor)

    def reconcile(self, old: EditValue, proposed: EditValue) -> EditValue:
        """Decide what the field shows after the user proposes an edit.

        Args:
            old: The value currently committed in the field.
            proposed: The value the field would have after the raw edit.

        Returns:
            The value to display: *proposed* when it is already canonical,
            *old* when the edit is rejected, otherwise a newly masked value
            with the cursor kept next to the same digit.
        """
        text = proposed.text

        if classify_edit(text) is EditKind.CALCULATION:
            return self._reconcile_calculation(proposed)

        if len(text) == 1 and text in (self.decimal_separator, ",", "."):
            return EditValue.empty()
        if text == "":
            return EditValue.empty()
        if text == "0":
            return EditValue("0", 1)

        # Too many separators
        if text.count(self.decimal_separator) > 1:
            logger.debug("rejected edit %r: more than one decimal separator", text)
            return old

        masked = self.apply_mask(text)
        if masked == text:
            return proposed

        grouping = self.thousand_separator
        new_logical = None
        offset = None
        if proposed.cursor is not None:
            new_logical = logical_offset(text, proposed.cursor, grouping)
            offset = char_offset(masked, new_logical, grouping)
        old_logical = None
        if old.cursor is not None:
            old_logical = logical_offset(old.text, old.cursor, grouping)

        zero_suffix = f"{self.decimal_separator}0"
        if text.endswith(self.decimal_separator):
            masked += self.decimal_separator
        elif text.endswith(zero_suffix) and self._moved_forward(old_logical, new_logical):
            masked += zero_suffix

        if offset is not None:
            offset = min(offset, len(masked))
        logger.debug("masked %r -> %r, cursor %s -> %s", text, masked, proposed.cursor, offset)
        return EditValue(masked, offset)

    @staticmethod
    def _moved_forward(old_logical: int | None, new_logical: int | None) -> bool:
        """Return True if the cursor moved forward or stayed; unknown counts as stayed."""
        if old_logical is None or new_logical is None:
            return True
        return new_logical - old_logical >= 0
