from pathlib import Path
from typing import Optional, Union


class DataAccessError(Exception):
    """The input file cannot be opened, decoded or split into rows/columns."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path
