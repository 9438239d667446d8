# ==============================================
# Value
# ==============================================
#
# PURPOSE:
#   One cell's parsed numeric state: either a present reading
#   or an explicit "missing" marker. Missing only comes from an
#   empty cell; text that is not a number never becomes a Value.
#
# CLASS: Value (frozen dataclass)
# -------------------------------
#   - number: float | None   → The reading, None when missing
#
#   Constructors:
#   - Value.exist(number)    → Present reading
#   - Value.empty()          → Missing marker
#
#   Properties:
#   - is_present -> bool
#
# ==============================================

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Value:
    """A present numeric reading, or a missing one."""

    number: Optional[float] = None

    @classmethod
    def exist(cls, number: float) -> "Value":
        return cls(number=float(number))

    @classmethod
    def empty(cls) -> "Value":
        return cls(number=None)

    @property
    def is_present(self) -> bool:
        return self.number is not None
