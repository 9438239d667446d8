# ==============================================
# CsvLoader
# ==============================================
#
# PURPOSE:
#   Read a delimited file (header row + data rows) and hand the
#   analysis core one (column name, raw values) pair per header
#   column, values in row order.
#
# RULES:
# ------
#   - Empty cells are kept as "" (they mean "missing" downstream).
#   - Blank lines are skipped.
#   - A data row with a different number of fields than the
#     header is a structural error.
#
# ERRORS (all raised as DataAccessError):
# ---------------------------------------
#   - File missing / unreadable (OSError)
#   - File not decodable with the configured encoding
#   - Malformed quoting (csv.Error)
#   - No header row
#   - Row length mismatch
#
# ==============================================

import csv
from pathlib import Path
from typing import List, Tuple, Union

from .errors import DataAccessError


Columns = List[Tuple[str, List[str]]]


class CsvLoader:
    """
    Loads a delimited text file into columns of raw strings.
    """

    def __init__(self, delimiter: str = ",", encoding: str = "utf-8"):
        """
        Args:
            delimiter: Single-character field separator
            encoding: Text encoding of the input file
        """
        self.delimiter = delimiter
        self.encoding = encoding

    def load(self, path: Union[str, Path]) -> Columns:
        """
        Read the file into columns.

        Args:
            path: Path to the delimited file

        Returns:
            List of (column name, raw values) pairs in header order

        Raises:
            DataAccessError: If the file cannot be read or its structure
                             cannot be parsed into rows/columns
        """
        path = Path(path)
        try:
            with path.open("r", encoding=self.encoding, newline="") as f:
                return self._read_columns(csv.reader(f, delimiter=self.delimiter), path)
        except OSError as e:
            raise DataAccessError(f"Cannot open '{path}': {e.strerror or e}", path) from e
        except UnicodeDecodeError as e:
            raise DataAccessError(
                f"Cannot decode '{path}' as {self.encoding}: {e.reason}", path
            ) from e
        except csv.Error as e:
            raise DataAccessError(f"Malformed CSV in '{path}': {e}", path) from e

    def _read_columns(self, reader, path: Path) -> Columns:
        header = None
        for header in reader:
            if header:
                break
        if not header:
            raise DataAccessError(f"'{path}' has no header row", path)

        cells: List[List[str]] = [[] for _ in header]
        for row in reader:
            if not row:
                continue
            if len(row) != len(header):
                raise DataAccessError(
                    f"Line {reader.line_num} of '{path}' has {len(row)} fields, "
                    f"expected {len(header)}",
                    path
                )
            for column, cell in zip(cells, row):
                column.append(cell)

        return list(zip(header, cells))
