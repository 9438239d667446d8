# ==============================================
# Tests for Loading Module
# ==============================================

import pytest

from describe.loading import CsvLoader, DataAccessError


class TestCsvLoader:

    def test_columns_in_header_order(self, write_csv):
        path = write_csv("a,b,c\n1,x,\n2,y,3\n")
        columns = CsvLoader().load(path)
        assert columns == [
            ("a", ["1", "2"]),
            ("b", ["x", "y"]),
            ("c", ["", "3"]),
        ]

    def test_accepts_str_path(self, write_csv):
        path = write_csv("a\n1\n")
        assert CsvLoader().load(str(path)) == [("a", ["1"])]

    def test_quoted_fields(self, write_csv):
        path = write_csv('name,note\n"Doe, John","said ""hi"""\n')
        assert CsvLoader().load(path) == [
            ("name", ["Doe, John"]),
            ("note", ['said "hi"']),
        ]

    def test_blank_lines_skipped(self, write_csv):
        path = write_csv("\na,b\n1,2\n\n3,4\n")
        assert CsvLoader().load(path) == [("a", ["1", "3"]), ("b", ["2", "4"])]

    def test_header_only(self, write_csv):
        path = write_csv("a,b\n")
        assert CsvLoader().load(path) == [("a", []), ("b", [])]

    def test_custom_delimiter(self, write_csv):
        path = write_csv("a\tb\n1\t2\n")
        assert CsvLoader(delimiter="\t").load(path) == [("a", ["1"]), ("b", ["2"])]

    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.csv"
        with pytest.raises(DataAccessError) as exc_info:
            CsvLoader().load(path)
        assert exc_info.value.path == path
        assert "missing.csv" in str(exc_info.value)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(DataAccessError):
            CsvLoader().load(tmp_path)

    def test_empty_file(self, write_csv):
        path = write_csv("")
        with pytest.raises(DataAccessError, match="no header row"):
            CsvLoader().load(path)

    def test_row_length_mismatch(self, write_csv):
        path = write_csv("a,b\n1,2\n3\n")
        with pytest.raises(DataAccessError, match="Line 3"):
            CsvLoader().load(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes(b"a,b\n\xff,1\n")
        with pytest.raises(DataAccessError, match="decode"):
            CsvLoader().load(path)

    def test_other_encoding(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes("café,b\n1,2\n".encode("latin-1"))
        assert CsvLoader(encoding="latin-1").load(path)[0] == ("café", ["1"])
