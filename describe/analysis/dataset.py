# ==============================================
# Dataset
# ==============================================
#
# PURPOSE:
#   Owns the ordered collection of Features built from one file,
#   forces their computation, and projects them into the two
#   summary tables (continuous / discrete).
#
# CLASS: Dataset
# --------------
#   Constructors:
#   -------------
#   - Dataset(features: list[Feature])
#   - Dataset.from_rows(columns) (classmethod)
#       One Feature per (name, raw values) pair, column order kept.
#
#   Methods:
#   --------
#   - compute_all() -> None
#       Trigger every metric on every feature. Idempotent.
#   - continuous_features() / discrete_features() -> list[Feature]
#   - render_summary(precision: int = 6) -> DatasetSummary
#       Continuous table: rows Mean, Std, 25%, 50%, 75%, Min, Max.
#       Discrete table: row "Number of different values".
#       STRING and EMPTY features appear in neither.
#
# ==============================================

import math
from typing import Iterable, Iterator, List, Sequence, Tuple

from .feature import Feature
from .feature_content import FeatureKind
from .summary import DatasetSummary, SummaryRow, SummaryTable


CONTINUOUS_TITLE = "Continuous features :"
DISCRETE_TITLE = "Discreat features :"
DISTINCT_LABEL = "Number of different values"


class Dataset:
    """
    Ordered collection of Features, one per column of the input.
    """

    def __init__(self, features: Iterable[Feature] = ()):
        self.features: List[Feature] = list(features)

    @classmethod
    def from_rows(cls, columns: Iterable[Tuple[str, Sequence[str]]]) -> "Dataset":
        """
        Build one Feature per column.

        Args:
            columns: (name, raw values) pairs in file column order

        Returns:
            A Dataset with features in the same order
        """
        return cls(Feature(name, values) for name, values in columns)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __getitem__(self, name: str) -> Feature:
        """
        Look up a feature by column name (first match).

        Raises:
            KeyError: If no feature has this name
        """
        for feature in self.features:
            if feature.name == name:
                return feature
        raise KeyError(name)

    def compute_all(self) -> None:
        """Force every metric of every feature into its cache."""
        for feature in self.features:
            feature.compute_all()

    def continuous_features(self) -> List[Feature]:
        return [f for f in self.features if f.kind is FeatureKind.CONTINUOUS]

    def discrete_features(self) -> List[Feature]:
        return [f for f in self.features if f.kind is FeatureKind.DISCRETE]

    def render_summary(self, precision: int = 6) -> DatasetSummary:
        """
        Project the features into the continuous and discrete tables.

        Args:
            precision: Decimal places for continuous statistics

        Returns:
            DatasetSummary with display-ready string cells
        """
        return DatasetSummary(
            continuous=self._continuous_table(precision),
            discrete=self._discrete_table(),
        )

    def _continuous_table(self, precision: int) -> SummaryTable:
        features = self.continuous_features()
        table = SummaryTable(
            title=CONTINUOUS_TITLE,
            feature_names=[f.name for f in features]
        )

        for label, getter in Feature.METRIC_LABELS:
            cells = []
            for feature in features:
                value = getattr(feature, getter)()
                # Absent metrics are left out of the row
                if value is not None:
                    cells.append(_format_number(value, precision))
            table.rows.append(SummaryRow(label=label, cells=cells))

        return table

    def _discrete_table(self) -> SummaryTable:
        features = self.discrete_features()
        cells = [
            str(f.discrete_number()) for f in features
            if f.discrete_number() is not None
        ]
        return SummaryTable(
            title=DISCRETE_TITLE,
            feature_names=[f.name for f in features],
            rows=[SummaryRow(label=DISTINCT_LABEL, cells=cells)],
        )


def _format_number(value: float, precision: int) -> str:
    if math.isnan(value):
        return "nan"
    return f"{value:.{precision}f}"
