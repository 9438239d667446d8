# ==============================================
# csv-describe
# ==============================================
#
# Package Structure (core + collaborators):
#
# describe/
# ├── parsing/      # Raw cell text → Value (present / missing)
# ├── analysis/     # Feature classification & statistics (the core)
# ├── loading/      # Read a delimited file into named columns
# ├── rendering/    # Print summary tables to the terminal
# ├── config.py     # Configuration management
# └── cli.py        # Command line entry point
#
# ==============================================

__version__ = "1.0.0"
