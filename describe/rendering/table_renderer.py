from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from describe.analysis.summary import DatasetSummary, SummaryTable


class TableRenderer:
    """
    Prints summary tables with rich.

    Each table is preceded by its title on a line of its own. The first
    column holds the row labels; rows shorter than the header are padded
    with blank cells. Header names and cells come from the input file, so
    they are wrapped in Text and never parsed as console markup.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, summary: DatasetSummary) -> None:
        for table in summary:
            self.console.print(Text(table.title))
            self.console.print(self.build_table(table))

    def build_table(self, summary_table: SummaryTable) -> Table:
        """
        Convert one SummaryTable into a rich Table.

        Args:
            summary_table: Display-ready table from Dataset.render_summary()

        Returns:
            The rich Table, not yet printed
        """
        table = Table(box=box.ASCII, show_header=True)
        table.add_column("", style="bold")
        for name in summary_table.feature_names:
            table.add_column(Text(name), justify="right", overflow="fold")

        for row in summary_table.rows:
            table.add_row(Text(row.label), *(Text(cell) for cell in row.cells))

        return table
