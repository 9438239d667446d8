# ==============================================
# RENDERING
# ==============================================
#
# This package prints a DatasetSummary to the terminal.
#
# Modules:
# --------
# - table_renderer.py → One rich Table per SummaryTable
#
# ==============================================

from .table_renderer import TableRenderer

__all__ = ["TableRenderer"]
