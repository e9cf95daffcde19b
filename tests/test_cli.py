"""Tests for the quartzcron command-line interface."""

import json

import polars as pl
import pytest
from typer.testing import CliRunner

from quartzcron.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def jobs_csv(tmp_path):
    path = tmp_path / "jobs.csv"
    pl.DataFrame(
        {
            "job": ["report", "sync"],
            "schedule": ["0 0 12 * * ?", "0 15 10 ? * MON-FRI"],
        }
    ).write_csv(path)
    return path


@pytest.fixture
def broken_csv(tmp_path):
    path = tmp_path / "broken.csv"
    pl.DataFrame(
        {"cron": ["0 0 12 * * ?", "0 0 25 * * ?", "0 0 * * * *"]}
    ).write_csv(path)
    return path


# =============================================================================
# validate Command Tests
# =============================================================================


class TestValidateCommand:
    """Tests for `quartzcron validate`."""

    def test_valid_expressions(self, runner):
        """Test all-valid input exits 0."""
        result = runner.invoke(app, ["validate", "0 0 12 * * ?", "0 15 10 ? * mon-fri"])
        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "0 15 10 ? * MON-FRI" in result.output

    def test_invalid_expression(self, runner):
        """Test any invalid input exits 20."""
        result = runner.invoke(app, ["validate", "0 0 12 * * ?", "0 0 * * * *"])
        assert result.exit_code == 20
        assert "INVALID" in result.output
        assert "day-of-week AND a day-of-month" in result.output

    def test_json_output(self, runner):
        """Test JSON output."""
        result = runner.invoke(app, ["validate", "0 0 12 * * ?", "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload == [
            {
                "input": "0 0 12 * * ?",
                "valid": True,
                "expression": "0 0 12 * * ?",
                "error": None,
            }
        ]

    def test_config_file(self, runner, tmp_path):
        """Test --config enables strict extra-field handling."""
        config = tmp_path / "strict.yaml"
        config.write_text("quartzcron:\n  reject_extra_fields: true\n")
        expression = "0 0 12 * * ? 2030 EXTRA"

        assert runner.invoke(app, ["validate", expression]).exit_code == 0
        result = runner.invoke(app, ["validate", expression, "--config", str(config)])
        assert result.exit_code == 20

    def test_invalid_config_file(self, runner, tmp_path):
        """Test a config file that is not a mapping exits 31."""
        config = tmp_path / "bad.yaml"
        config.write_text("- reject_extra_fields\n")
        result = runner.invoke(app, ["validate", "0 0 12 * * ?", "-c", str(config)])
        assert result.exit_code == 31

    def test_missing_config_file(self, runner, tmp_path):
        """Test a missing config file exits 10."""
        result = runner.invoke(
            app, ["validate", "0 0 12 * * ?", "--config", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 10

    def test_invalid_environment(self, runner, monkeypatch):
        """Test a bad environment setting exits 31."""
        monkeypatch.setenv("QUARTZCRON_MAX_EXPRESSION_LENGTH", "lots")
        result = runner.invoke(app, ["validate", "0 0 12 * * ?"])
        assert result.exit_code == 31


# =============================================================================
# explain Command Tests
# =============================================================================


class TestExplainCommand:
    """Tests for `quartzcron explain`."""

    def test_console_output(self, runner):
        """Test the rich table lists every field."""
        result = runner.invoke(app, ["explain", "0 0/15 9-17 ? * MON-FRI"])
        assert result.exit_code == 0
        assert "0 0/15 9-17 ? * MON-FRI" in result.output
        for label in ("second", "minute", "hour", "day_of_month", "year"):
            assert label in result.output
        assert "0,15,30,45" in result.output
        assert "9-17" in result.output

    def test_markers_listed(self, runner):
        """Test markers appear below the table."""
        result = runner.invoke(app, ["explain", "0 0 18 LW * ?"])
        assert result.exit_code == 0
        assert "last day of month" in result.output
        assert "nearest weekday" in result.output

    def test_json_output(self, runner):
        """Test JSON output."""
        result = runner.invoke(app, ["explain", "0 15 10 ? * 6#3", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["hour"]["values"] == [10]
        assert data["day_of_week"]["values"] == [6]
        assert data["markers"]["nth_day_of_week"] == 3

    def test_invalid_expression(self, runner):
        """Test invalid input exits 20."""
        result = runner.invoke(app, ["explain", "0 0 12 ? * ?"])
        assert result.exit_code == 20
        assert "Invalid cron expression" in result.output


# =============================================================================
# check Command Tests
# =============================================================================


class TestCheckCommand:
    """Tests for `quartzcron check`."""

    def test_all_valid(self, runner, jobs_csv):
        """Test a clean file."""
        result = runner.invoke(app, ["check", str(jobs_csv)])
        assert result.exit_code == 0
        assert "All 2 expressions are valid" in result.output

    def test_invalid_rows_reported(self, runner, broken_csv):
        """Test invalid rows are listed without failing by default."""
        result = runner.invoke(app, ["check", str(broken_csv), "--column", "cron"])
        assert result.exit_code == 0
        assert "2 of 3 expressions are invalid" in result.output

    def test_strict(self, runner, broken_csv):
        """Test --strict exits 20 when rows are invalid."""
        result = runner.invoke(app, ["check", str(broken_csv), "-c", "cron", "--strict"])
        assert result.exit_code == 20

    def test_json_output(self, runner, broken_csv):
        """Test JSON output."""
        result = runner.invoke(app, ["check", str(broken_csv), "-c", "cron", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["summary"]["invalid"] == 2
        assert data["summary"]["by_kind"] == {
            "exclusivity_violation": 1,
            "invalid_numeric_value": 1,
        }
        assert [row["row"] for row in data["invalid"]] == [1, 2]
        assert data["invalid"][0]["expression"] == "0 0 25 * * ?"

    def test_backwards_year_range_row(self, runner, tmp_path):
        """Test a backwards year range is reported as an invalid row."""
        path = tmp_path / "years.csv"
        pl.DataFrame(
            {"schedule": ["0 0 12 * * ?", "0 0 0 ? * * 2030-2020"]}
        ).write_csv(path)
        result = runner.invoke(app, ["check", str(path), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["summary"]["invalid"] == 1
        assert data["invalid"][0]["error"] == "Start year must be less than stop year"

    def test_missing_file(self, runner, tmp_path):
        """Test a missing file exits 10."""
        result = runner.invoke(app, ["check", str(tmp_path / "missing.csv")])
        assert result.exit_code == 10
        assert "File not found" in result.output

    def test_unsupported_extension(self, runner, tmp_path):
        """Test an unreadable format exits 13."""
        path = tmp_path / "jobs.txt"
        path.write_text("schedule\n0 0 12 * * ?\n")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 13

    def test_missing_column(self, runner, jobs_csv):
        """Test an unknown column exits 2."""
        result = runner.invoke(app, ["check", str(jobs_csv), "--column", "cron"])
        assert result.exit_code == 2
        assert "Column 'cron' not found" in result.output


# =============================================================================
# presets Command Tests
# =============================================================================


class TestPresetsCommand:
    """Tests for `quartzcron presets`."""

    def test_console_output(self, runner):
        """Test the preset table."""
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        assert "weekdays_9am" in result.output
        assert "0 0 9 ? * MON-FRI" in result.output

    def test_json_output(self, runner):
        """Test JSON output."""
        result = runner.invoke(app, ["presets", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["last_friday"] == "0 0 17 ? * 6L"

    def test_verbose_flag(self, runner):
        """Test the global --verbose option."""
        result = runner.invoke(app, ["--verbose", "presets"])
        assert result.exit_code == 0
