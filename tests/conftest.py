# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - isolated_config (autouse): fresh config singleton, no DESCRIBE_*
#   variables, working directory in tmp_path (no stray .env)
# - write_csv: write text to a CSV file under tmp_path
# - mixed_csv: 30-row file with one column of every kind
# ==============================================

import pytest

import describe.config


CONFIG_VARIABLES = ("DESCRIBE_DELIMITER", "DESCRIBE_ENCODING", "DESCRIBE_PRECISION")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Reset configuration state around every test."""
    monkeypatch.setattr(describe.config, "_config_instance", None)
    for name in CONFIG_VARIABLES:
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_csv(tmp_path):
    """Return a helper that writes text to a file and returns its path."""
    def _write(text: str, name: str = "data.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def mixed_rows():
    """30 rows: num (continuous), color (discrete), comment (string), blank (empty)."""
    return [
        (str(i), ["red", "green"][i % 2], f"note {i}", "")
        for i in range(30)
    ]


@pytest.fixture
def mixed_csv(write_csv, mixed_rows):
    lines = ["num,color,comment,blank"]
    lines += [",".join(row) for row in mixed_rows]
    return write_csv("\n".join(lines) + "\n")
