# ==============================================
# Summary (Data Classes)
# ==============================================
#
# PURPOSE:
#   Display-ready projection of a Dataset. These are the OUTPUT
#   of Dataset.render_summary() and the INPUT of the renderer.
#   Every cell is already a string.
#
# CLASSES:
# --------
# - SummaryRow (dataclass)
#     - label: str          → e.g. "Mean", "Number of different values"
#     - cells: list[str]    → One cell per feature that has the metric.
#                             May be shorter than the header.
#
# - SummaryTable (dataclass)
#     - title: str
#     - feature_names: list[str]   → Header, dataset order
#     - rows: list[SummaryRow]
#
#     Methods:
#     - to_grid() -> list[list[str]]  → Header + rows, label column first
#
# - DatasetSummary (dataclass)
#     - continuous: SummaryTable
#     - discrete: SummaryTable
#
# ==============================================

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class SummaryRow:
    """One labelled row of a summary table."""
    label: str
    cells: List[str] = field(default_factory=list)


@dataclass
class SummaryTable:
    """A titled table: feature names as header, one row per metric."""
    title: str
    feature_names: List[str] = field(default_factory=list)
    rows: List[SummaryRow] = field(default_factory=list)

    def row(self, label: str) -> SummaryRow:
        """
        Look up a row by label.

        Raises:
            KeyError: If no row has this label
        """
        for summary_row in self.rows:
            if summary_row.label == label:
                return summary_row
        raise KeyError(label)

    def to_grid(self) -> List[List[str]]:
        """Header row followed by data rows, each prefixed with its label."""
        grid = [[""] + list(self.feature_names)]
        for summary_row in self.rows:
            grid.append([summary_row.label] + list(summary_row.cells))
        return grid


@dataclass
class DatasetSummary:
    """The two tables produced for a dataset, in display order."""
    continuous: SummaryTable
    discrete: SummaryTable

    def __iter__(self) -> Iterator[SummaryTable]:
        yield self.continuous
        yield self.discrete
