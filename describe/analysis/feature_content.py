# ==============================================
# FeatureContent (Data Classes)
# ==============================================
#
# PURPOSE:
#   The classified content of one column. The kind is chosen once
#   when a Feature is built and never changes afterwards.
#
# ENUMS:
# ------
# - FeatureKind(Enum): STRING, CONTINUOUS, DISCRETE, EMPTY
#
# CLASSES:
# --------
# - FeatureContent (frozen dataclass)
#     - kind: FeatureKind
#     - raw: tuple[str, ...]        → Raw cells (STRING, DISCRETE)
#     - values: tuple[Value, ...]   → Parsed cells (CONTINUOUS, EMPTY)
#
#     Constructors (one per kind):
#     - FeatureContent.string(raw)
#     - FeatureContent.continuous(values)
#     - FeatureContent.discrete(raw)
#     - FeatureContent.empty(values)
#
# ==============================================

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

from describe.parsing import Value


class FeatureKind(Enum):
    """
    Enumeration of column classifications.

    - STRING: free text, too many distinct values to be categorical
    - CONTINUOUS: numeric cells (blanks allowed), at least one present
    - DISCRETE: non-numeric text with few distinct values
    - EMPTY: numeric-or-blank cells with no present reading at all
    """
    STRING = "string"
    CONTINUOUS = "continuous"
    DISCRETE = "discrete"
    EMPTY = "empty"


@dataclass(frozen=True)
class FeatureContent:
    """Classified, immutable content of a single column."""

    kind: FeatureKind
    raw: Tuple[str, ...] = ()
    values: Tuple[Value, ...] = ()

    @classmethod
    def string(cls, raw: Iterable[str]) -> "FeatureContent":
        return cls(kind=FeatureKind.STRING, raw=tuple(raw))

    @classmethod
    def continuous(cls, values: Iterable[Value]) -> "FeatureContent":
        return cls(kind=FeatureKind.CONTINUOUS, values=tuple(values))

    @classmethod
    def discrete(cls, raw: Iterable[str]) -> "FeatureContent":
        return cls(kind=FeatureKind.DISCRETE, raw=tuple(raw))

    @classmethod
    def empty(cls, values: Iterable[Value]) -> "FeatureContent":
        return cls(kind=FeatureKind.EMPTY, values=tuple(values))

    def present_numbers(self) -> Iterator[float]:
        """Yield every present reading, in row order."""
        for value in self.values:
            if value.is_present:
                yield value.number
