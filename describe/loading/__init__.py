# ==============================================
# LOADING
# ==============================================
#
# This package reads a delimited file into named columns
# of raw cell text. It is the only place that touches the
# input file.
#
# Modules:
# --------
# - errors.py      → DataAccessError
# - csv_loader.py  → Header row + data rows → (name, values) pairs
#
# ==============================================

from .errors import DataAccessError
from .csv_loader import CsvLoader

__all__ = ["DataAccessError", "CsvLoader"]
