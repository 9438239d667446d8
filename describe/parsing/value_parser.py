import re
from typing import List, Optional, Sequence

from .value import Value


class ValueParser:
    """
    Parses raw cell text into a Value.

    A cell is a number (decimal or exponent notation, optional sign,
    inf/infinity/nan in any case), an empty cell (missing), or neither.
    Surrounding whitespace is ignored.
    """

    MISSING_VARIANTS = {""}

    NUMBER_PATTERN = re.compile(
        r'^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)$',
        re.IGNORECASE | re.ASCII
    )

    @classmethod
    def parse(cls, raw: str) -> Optional[Value]:
        """
        Parse one raw cell.

        Args:
            raw: The cell text as read from the file

        Returns:
            Value.exist(x) for a number, Value.empty() for an empty cell,
            or None when the cell is neither
        """
        value_stripped = raw.strip()

        if cls._is_number(value_stripped):
            return Value.exist(float(value_stripped))

        if value_stripped in cls.MISSING_VARIANTS:
            return Value.empty()

        return None

    @classmethod
    def parse_all(cls, raw_values: Sequence[str]) -> Optional[List[Value]]:
        """
        Parse a whole column, stopping at the first cell that is neither
        numeric nor empty.

        Returns:
            One Value per raw cell, or None if any cell failed to parse
        """
        values = []
        for raw in raw_values:
            value = cls.parse(raw)
            if value is None:
                return None
            values.append(value)
        return values

    @classmethod
    def _is_number(cls, value: str) -> bool:
        return bool(cls.NUMBER_PATTERN.match(value))
