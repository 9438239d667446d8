# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from describe.config import AppConfig, CsvConfig, DisplayConfig, get_config, load_config


class TestConfig:

    def test_defaults(self):
        config = load_config()
        assert config.csv.delimiter == ","
        assert config.csv.encoding == "utf-8"
        assert config.display.precision == 6

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DESCRIBE_DELIMITER", ";")
        monkeypatch.setenv("DESCRIBE_ENCODING", "latin-1")
        monkeypatch.setenv("DESCRIBE_PRECISION", "2")
        config = load_config()
        assert config.csv == CsvConfig(delimiter=";", encoding="latin-1")
        assert config.display == DisplayConfig(precision=2)

    def test_dotenv_file_in_working_directory(self, tmp_path):
        (tmp_path / ".env").write_text("DESCRIBE_PRECISION=3\n", encoding="utf-8")
        assert load_config().display.precision == 3

    def test_environment_wins_over_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("DESCRIBE_PRECISION=3\n", encoding="utf-8")
        monkeypatch.setenv("DESCRIBE_PRECISION", "1")
        assert load_config().display.precision == 1

    def test_bad_precision(self, monkeypatch):
        monkeypatch.setenv("DESCRIBE_PRECISION", "many")
        with pytest.raises(ValueError, match="DESCRIBE_PRECISION"):
            load_config()

    def test_negative_precision(self):
        with pytest.raises(ValueError):
            DisplayConfig(precision=-1)

    @pytest.mark.parametrize("delimiter", ["", ";;"])
    def test_bad_delimiter(self, delimiter):
        with pytest.raises(ValueError, match="delimiter"):
            CsvConfig(delimiter=delimiter)

    def test_get_config_singleton(self):
        assert get_config() is get_config()

    def test_app_config_defaults(self):
        config = AppConfig()
        assert config.csv.delimiter == ","
        assert config.display.precision == 6
