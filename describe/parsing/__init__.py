# ==============================================
# PARSING
# ==============================================
#
# This package turns raw cell text into numeric readings
# BEFORE a column is classified.
#
# Modules:
# --------
# - value.py         → Value: a present reading or a missing marker
# - value_parser.py  → Parse raw text into a Value (or report failure)
#
# ==============================================

from .value import Value
from .value_parser import ValueParser

__all__ = ["Value", "ValueParser"]
