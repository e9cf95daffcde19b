"""Tests for parser configuration."""

import pytest

from quartzcron.config import DEFAULT_CONFIG, ParserConfig


class TestParserConfig:
    """Tests for ParserConfig construction."""

    def test_defaults(self):
        """Test default values."""
        assert DEFAULT_CONFIG.reject_extra_fields is False
        assert DEFAULT_CONFIG.max_expression_length == 1024

    def test_invalid_length(self):
        """Test non-positive lengths are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            ParserConfig(max_expression_length=0)

    def test_with_overrides(self):
        """Test overrides return a new instance."""
        config = DEFAULT_CONFIG.with_overrides(reject_extra_fields=True)
        assert config.reject_extra_fields
        assert not DEFAULT_CONFIG.reject_extra_fields

    def test_dict_round_trip(self):
        """Test to_dict and from_dict."""
        config = ParserConfig(reject_extra_fields=True, max_expression_length=64)
        assert ParserConfig.from_dict(config.to_dict()) == config

    def test_from_dict_ignores_unknown_keys(self):
        """Test unknown keys are ignored."""
        assert ParserConfig.from_dict({"color": "blue"}) == DEFAULT_CONFIG


class TestFromEnv:
    """Tests for ParserConfig.from_env()."""

    def test_no_variables(self, monkeypatch):
        """Test defaults when nothing is set."""
        monkeypatch.delenv("QUARTZCRON_REJECT_EXTRA_FIELDS", raising=False)
        monkeypatch.delenv("QUARTZCRON_MAX_EXPRESSION_LENGTH", raising=False)
        assert ParserConfig.from_env() == DEFAULT_CONFIG

    @pytest.mark.parametrize("value", ["true", "1", "YES", "on"])
    def test_reject_extra_fields(self, monkeypatch, value):
        """Test truthy spellings."""
        monkeypatch.setenv("QUARTZCRON_REJECT_EXTRA_FIELDS", value)
        assert ParserConfig.from_env().reject_extra_fields

    def test_false_value(self, monkeypatch):
        """Test other spellings mean false."""
        monkeypatch.setenv("QUARTZCRON_REJECT_EXTRA_FIELDS", "no")
        assert not ParserConfig.from_env().reject_extra_fields

    def test_max_length(self, monkeypatch):
        """Test the length variable."""
        monkeypatch.setenv("QUARTZCRON_MAX_EXPRESSION_LENGTH", "128")
        assert ParserConfig.from_env().max_expression_length == 128

    def test_invalid_max_length(self, monkeypatch):
        """Test a non-integer length."""
        monkeypatch.setenv("QUARTZCRON_MAX_EXPRESSION_LENGTH", "lots")
        with pytest.raises(ValueError, match="Must be an integer"):
            ParserConfig.from_env()

    def test_custom_prefix(self, monkeypatch):
        """Test a custom prefix."""
        monkeypatch.setenv("CRON_REJECT_EXTRA_FIELDS", "true")
        assert ParserConfig.from_env(prefix="CRON_").reject_extra_fields


class TestFromFile:
    """Tests for ParserConfig.from_file()."""

    def test_top_level_keys(self, tmp_path):
        """Test settings at the top level."""
        path = tmp_path / "cron.yaml"
        path.write_text("reject_extra_fields: true\nmax_expression_length: 200\n")
        config = ParserConfig.from_file(path)
        assert config.reject_extra_fields
        assert config.max_expression_length == 200

    def test_nested_section(self, tmp_path):
        """Test settings under a quartzcron key."""
        path = tmp_path / "settings.yaml"
        path.write_text("quartzcron:\n  reject_extra_fields: true\nother: 1\n")
        assert ParserConfig.from_file(path).reject_extra_fields

    def test_empty_file(self, tmp_path):
        """Test an empty file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ParserConfig.from_file(path) == DEFAULT_CONFIG

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            ParserConfig.from_file(path)
