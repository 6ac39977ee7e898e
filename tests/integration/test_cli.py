"""Integration tests for the deckframe CLI."""

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from deckframe.application.config import load_request
from deckframe.cli.main import _load_or_exit, app, merge_request_with_cli

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"

LEDGER_OPTIONS = [
    "--width",
    "12",
    "--length",
    "16",
    "--height",
    "2",
    "--attachment",
    "ledger",
    "--footing",
    "concrete",
    "--species",
    "SPF #2",
    "--decking",
    "composite_1in",
]


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestComputeCommand:
    """Tests for the compute command."""

    def test_request_file_text(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compute", str(FIXTURES_PATH / "ledger_deck.json")])
        assert result.exit_code == 0
        assert "DECK STRUCTURE" in result.output
        assert "COMPLIANCE: PASS" in result.output

    def test_options_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compute", *LEDGER_OPTIONS, "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["joists"]["size"] == "2x8"
        assert data["input"]["attachment"] == "ledger"

    def test_options_override_file(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "compute",
                str(FIXTURES_PATH / "ledger_deck.json"),
                "--goal",
                "strength",
                "-f",
                "json",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["optimization_goal"] == "strength"
        assert "reserve_capacity_min" in data["metrics"]

    def test_csv_to_file(self, runner: CliRunner, tmp_path: Path) -> None:
        output = tmp_path / "takeoff.csv"
        result = runner.invoke(
            app, ["compute", *LEDGER_OPTIONS, "-f", "csv", "-o", str(output)]
        )
        assert result.exit_code == 0
        assert "Wrote csv output" in result.output
        assert output.read_text(encoding="utf-8").startswith("Category,Subcategory")

    def test_unknown_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compute", *LEDGER_OPTIONS, "-f", "xml"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_invalid_request(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compute", str(FIXTURES_PATH / "invalid_fields.json")])
        assert result.exit_code == 1
        assert "INVALID_INPUT" in result.output
        assert "width_ft" in result.output

    def test_span_exceeded(self, runner: CliRunner) -> None:
        options = list(LEDGER_OPTIONS)
        options[1], options[3] = "30", "40"
        result = runner.invoke(app, ["compute", *options])
        assert result.exit_code == 1
        assert "SPAN_EXCEEDED" in result.output

    def test_missing_request_file(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["compute", str(FIXTURES_PATH / "nope.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_price_override(self, runner: CliRunner, tmp_path: Path) -> None:
        from deckframe.domain.services.pricing import default_price_book

        book = default_price_book().model_dump(mode="json")
        book["footings"]["concrete"] = 1000.0
        prices = tmp_path / "prices.json"
        prices.write_text(json.dumps(book), encoding="utf-8")

        result = runner.invoke(
            app, ["compute", *LEDGER_OPTIONS, "--prices", str(prices), "-f", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        footings = [i for i in data["material_takeoff"] if i["category"] == "footings"]
        assert footings[0]["unit_cost"] == 1000.0


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "ledger_deck.json")])
        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_invalid_fields(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "invalid_fields.json")]
        )
        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "species_grade: Field required [missing]" in result.output
        assert "Validation failed: 4 error(s)" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output


class TestTablesCommand:
    """Tests for the tables command."""

    def test_one_species(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["tables", "--species", "SP #2"])
        assert result.exit_code == 0
        assert "JOIST SPANS - SP #2" in result.output
        assert "SPF #2" not in result.output

    def test_all_species(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["tables"])
        assert result.exit_code == 0
        assert result.output.count("JOIST SPANS") == 4


class TestMergeRequest:
    """Tests for merging CLI options over a request file."""

    def test_none_does_not_override(self) -> None:
        merged = merge_request_with_cli({"width_ft": 12}, {"width_ft": None, "height_ft": 3})
        assert merged == {"width_ft": 12, "height_ft": 3}


class TestLoadOrExit:
    """Tests for optional file loading in the compute command."""

    def test_no_path_loads_nothing(self) -> None:
        assert _load_or_exit(load_request, None) is None

    def test_returns_loaded_value(self) -> None:
        data = _load_or_exit(load_request, FIXTURES_PATH / "ledger_deck.json")
        assert data["attachment"] == "ledger"

    def test_missing_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            _load_or_exit(load_request, tmp_path / "missing.json")
        assert exc_info.value.exit_code == 1
