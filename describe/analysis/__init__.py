# ==============================================
# ANALYSIS
# ==============================================
#
# This package classifies columns and computes their
# descriptive statistics. It performs no I/O.
#
# Two-step process:
#   Step 1 (Classification): raw cells → FeatureContent, per column
#   Step 2 (Statistics):     memoized metrics per Feature, projected
#                            into summary tables by the Dataset
#
# Modules:
# --------
# - feature_content.py → FeatureKind enum and FeatureContent data class
# - feature.py         → Classify one column, compute its metrics
# - dataset.py         → Ordered Features, bulk compute, summary tables
# - summary.py         → Data classes for the display-ready tables
#
# ==============================================

from .feature_content import FeatureContent, FeatureKind
from .feature import Feature
from .dataset import Dataset
from .summary import DatasetSummary, SummaryRow, SummaryTable

__all__ = [
    "FeatureContent",
    "FeatureKind",
    "Feature",
    "Dataset",
    "DatasetSummary",
    "SummaryRow",
    "SummaryTable",
]
