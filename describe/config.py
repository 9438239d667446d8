# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to the loader, the summary projection and the CLI.
#
# CLASSES:
# --------
# - CsvConfig (dataclass)
#     delimiter: str     (default ",")
#     encoding: str      (default "utf-8")
#
# - DisplayConfig (dataclass)
#     precision: int     (default 6)
#
# - AppConfig (dataclass)
#     csv: CsvConfig
#     display: DisplayConfig
#
# FUNCTIONS:
# ----------
# - load_config() -> AppConfig
#     Load .env from the working directory using python-dotenv,
#     then build a fresh AppConfig from the environment.
#
# - get_config() -> AppConfig
#     Same as load_config(), but returns the same singleton on
#     repeated calls.
#
# USAGE:
# ------
#   from describe.config import get_config
#   config = get_config()
#   print(config.csv.delimiter)
#   print(config.display.precision)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class CsvConfig:
    """Delimited-file reading configuration."""
    delimiter: str = ","
    encoding: str = "utf-8"

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError(
                f"CSV delimiter must be a single character, got {self.delimiter!r}"
            )


@dataclass
class DisplayConfig:
    """Summary table display configuration."""
    precision: int = 6  # Decimal places for displayed statistics

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"Display precision must be >= 0, got {self.precision}")


@dataclass
class AppConfig:
    """Main application configuration."""
    csv: CsvConfig = field(default_factory=CsvConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def load_config() -> AppConfig:
    """
    Build configuration from environment variables / .env file.

    Values already present in the environment win over the .env file.

    Returns:
        AppConfig: Freshly built application configuration

    Raises:
        ValueError: If a variable holds a value of the wrong shape
    """
    # Load .env file from the directory the tool is run in
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    raw_precision = os.getenv("DESCRIBE_PRECISION", "6")
    try:
        precision = int(raw_precision)
    except ValueError:
        raise ValueError(
            f"DESCRIBE_PRECISION must be an integer, got {raw_precision!r}"
        ) from None

    csv_config = CsvConfig(
        delimiter=os.getenv("DESCRIBE_DELIMITER", ","),
        encoding=os.getenv("DESCRIBE_ENCODING", "utf-8"),
    )
    display_config = DisplayConfig(precision=precision)

    return AppConfig(csv=csv_config, display=display_config)


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = load_config()

    return _config_instance
