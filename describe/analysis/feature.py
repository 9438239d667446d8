# ==============================================
# Feature
# ==============================================
#
# PURPOSE:
#   One column of the dataset: its name, its classified content
#   and the statistics computed from it.
#
# CLASSIFICATION (done once, in the constructor):
# -----------------------------------------------
#   1. Parse every cell with ValueParser (number / empty / neither).
#   2. Every cell parsed → numeric-shaped:
#        count = number of present readings
#        count > 0  → CONTINUOUS
#        count == 0 → EMPTY
#   3. Some cell was neither → categorical-shaped:
#        count = raw row count
#        distinct = distinct non-empty cells
#        distinct < count // 10 → DISCRETE (discrete_number = distinct)
#        otherwise              → STRING
#
# METRICS (lazy, memoized in _cache, computed at most once):
# ----------------------------------------------------------
#   CONTINUOUS only:
#   - mean()        → sum(present) / count
#   - std()         → population std, divisor = count
#   - min(), max()  → over present readings
#   - quart(), median(), last_quart()
#                   → nearest rank over sorted present readings:
#                       quart      = v[(len + 1) // 4]
#                       median     = v[(len + 1) // 2]
#                       last_quart = v[len - len // 4]
#                     all three NaN when len == 0
#   DISCRETE only:
#   - discrete_number() → distinct non-empty cell count
#
#   Every getter returns None when the kind does not support it.
#
# ==============================================

import math
from collections import OrderedDict
from typing import Any, Dict, Optional, Sequence, Tuple

from describe.parsing import ValueParser
from .feature_content import FeatureContent, FeatureKind


class Feature:
    """
    A single column with its classification and memoized statistics.

    The content never changes after construction, so cached metrics
    never need to be invalidated.
    """

    # distinct < count // DISCRETE_DIVISOR makes a text column DISCRETE
    DISCRETE_DIVISOR = 10

    # Display label → getter name, in display order
    METRIC_LABELS = (
        ("Mean", "mean"),
        ("Std", "std"),
        ("25%", "quart"),
        ("50%", "median"),
        ("75%", "last_quart"),
        ("Min", "min"),
        ("Max", "max"),
    )

    def __init__(self, name: str, raw_values: Sequence[str]):
        """
        Classify a column.

        Args:
            name: Column name from the file header
            raw_values: Raw cell text, in row order
        """
        self.name = name
        self._cache: Dict[str, Any] = {}
        self._discrete_number: Optional[int] = None

        values = ValueParser.parse_all(raw_values)

        if values is not None:
            self.count = sum(1 for value in values if value.is_present)
            if self.count > 0:
                self.content = FeatureContent.continuous(values)
            else:
                self.content = FeatureContent.empty(values)
            return

        self.count = len(raw_values)
        distinct = self._count_distinct(raw_values)

        if distinct < self.count // self.DISCRETE_DIVISOR:
            self.content = FeatureContent.discrete(raw_values)
            self._discrete_number = distinct
        else:
            self.content = FeatureContent.string(raw_values)

    @staticmethod
    def _count_distinct(raw_values: Sequence[str]) -> int:
        """Count distinct non-empty cells (sort, then skip adjacent repeats)."""
        distinct = 0
        previous = None
        for raw in sorted(raw_values):
            if raw != previous and raw != "":
                distinct += 1
            previous = raw
        return distinct

    @property
    def kind(self) -> FeatureKind:
        return self.content.kind

    def _memoized(self, key: str, compute) -> Any:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    # ======================================
    # Continuous metrics
    # ======================================
    def mean(self) -> Optional[float]:
        """Arithmetic mean of present readings, divided by count."""
        if self.kind is not FeatureKind.CONTINUOUS:
            return None
        return self._memoized(
            "mean", lambda: sum(self.content.present_numbers()) / self.count
        )

    def std(self) -> Optional[float]:
        """Population standard deviation (divisor = count, not count - 1)."""
        if self.kind is not FeatureKind.CONTINUOUS:
            return None

        def compute() -> float:
            mean = self.mean()
            squares = sum((x - mean) ** 2 for x in self.content.present_numbers())
            return math.sqrt(squares / self.count)

        return self._memoized("std", compute)

    def min(self) -> Optional[float]:
        if self.kind is not FeatureKind.CONTINUOUS:
            return None
        return self._memoized("min", lambda: self._extreme(lambda x, best: x < best))

    def max(self) -> Optional[float]:
        if self.kind is not FeatureKind.CONTINUOUS:
            return None
        return self._memoized("max", lambda: self._extreme(lambda x, best: x > best))

    def _extreme(self, better) -> Optional[float]:
        best = None
        for x in self.content.present_numbers():
            if best is None or better(x, best):
                best = x
        return best

    def quart(self) -> Optional[float]:
        """25th percentile (nearest rank)."""
        quartiles = self._quartiles()
        return quartiles[0] if quartiles is not None else None

    def median(self) -> Optional[float]:
        """50th percentile (nearest rank)."""
        quartiles = self._quartiles()
        return quartiles[1] if quartiles is not None else None

    def last_quart(self) -> Optional[float]:
        """75th percentile (nearest rank)."""
        quartiles = self._quartiles()
        return quartiles[2] if quartiles is not None else None

    def _quartiles(self) -> Optional[Tuple[float, float, float]]:
        if self.kind is not FeatureKind.CONTINUOUS:
            return None
        return self._memoized("quartiles", self._compute_quartiles)

    def _compute_quartiles(self) -> Tuple[float, float, float]:
        """
        Pick the three quartiles from the sorted present readings.

        Indices use integer division and are not interpolated. For fewer
        than four readings the median or last quartile index can land one
        past the end; it is clamped to the last reading.
        """
        ordered = sorted(self.content.present_numbers())
        length = len(ordered)

        if length == 0:
            return (math.nan, math.nan, math.nan)

        indices = ((length + 1) // 4, (length + 1) // 2, length - length // 4)
        return tuple(ordered[min(index, length - 1)] for index in indices)

    # ======================================
    # Discrete metrics
    # ======================================
    def discrete_number(self) -> Optional[int]:
        """Number of distinct non-empty values (DISCRETE only)."""
        if self.kind is not FeatureKind.DISCRETE:
            return None
        return self._discrete_number

    # ======================================
    # Bulk access
    # ======================================
    def compute_all(self) -> None:
        """Force every metric getter so all results are cached."""
        for _, getter in self.METRIC_LABELS:
            getattr(self, getter)()

    def metrics(self) -> "OrderedDict[str, Optional[float]]":
        """
        Continuous metrics keyed by display label, in display order.

        Returns:
            Label → value; values are None for non-continuous features
        """
        return OrderedDict(
            (label, getattr(self, getter)()) for label, getter in self.METRIC_LABELS
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain dictionary view of the feature and all of its metrics.

        Returns:
            A dictionary with name, kind, count, every metric and
            discrete_number
        """
        data: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "count": self.count,
        }
        for _, getter in self.METRIC_LABELS:
            data[getter] = getattr(self, getter)()
        data["discrete_number"] = self.discrete_number()
        return data

    def __repr__(self) -> str:
        return f"Feature(name={self.name!r}, kind={self.kind.value}, count={self.count})"
