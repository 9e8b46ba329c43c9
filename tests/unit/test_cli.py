"""
tests/unit/test_cli.py - Tests for the command line interface.

Tests:
- cli/core.py - Context, results and command registry
- cli/commands.py - estimate, presets, defaults
- cli/main.py - Entry point and exit codes
"""

import csv
import io
import json

import pytest
from closurecost.bootstrap.config import EngineConfig
from closurecost.cli.main import EXIT_ERROR, EXIT_OK, build_registry, main


def run(argv, config=None):
    """Run the CLI and return (exit code, stdout text)."""
    out = io.StringIO()
    code = main(argv, config=config, stdout=out)
    return code, out.getvalue()


# =============================================================================
# CORE TESTS
# =============================================================================

class TestCommandRegistry:
    """Test command registration."""

    def test_builtin_commands(self):
        """estimate, presets and defaults are registered."""
        registry = build_registry()
        assert registry.list_commands() == ["estimate", "presets", "defaults"]

    def test_aliases(self):
        """Aliases resolve to their commands."""
        registry = build_registry()
        assert registry.get("run") is registry.get("estimate")
        assert registry.get("list") is registry.get("presets")
        assert registry.get("nope") is None

    def test_register_custom(self):
        """Custom commands can be registered."""
        from closurecost.cli.core import CLICommand, CommandRegistry, CommandResult

        class EchoCmd(CLICommand):
            name = "echo"
            aliases = ["e"]

            def execute(self, ctx, args):
                return CommandResult(output="echo")

        registry = CommandRegistry()
        registry.register(EchoCmd())
        assert registry.get("e").execute(None, None).output == "echo"

    def test_command_result_to_dict(self):
        from closurecost.cli.core import CommandResult

        result = CommandResult(message="ok", data={"x": 1})
        assert result.to_dict() == {"success": True, "message": "ok", "data": {"x": 1}}


# =============================================================================
# COMMAND TESTS
# =============================================================================

class TestEstimateCommand:
    """Test the estimate command."""

    def test_default_text(self):
        """Default scenario renders as text."""
        code, out = run(["estimate"])
        assert code == EXIT_OK
        assert out.startswith("Mine Closure Cost Estimate: Default Scenario")
        assert "$186,384,475" in out

    def test_alias(self):
        code, out = run(["run"])
        assert code == EXIT_OK
        assert "Default Scenario" in out

    def test_json(self):
        """JSON output carries inputs and results."""
        code, out = run(["estimate", "--format", "json"])
        data = json.loads(out)
        assert code == EXIT_OK
        assert data["results"]["peak_cashflow_year"] == 2030
        assert data["results"]["total_duration_years"] == 27

    def test_csv_section(self):
        """CSV output honours --csv-section."""
        code, out = run(["estimate", "-f", "csv", "--csv-section", "cashflows"])
        rows = list(csv.reader(io.StringIO(out)))
        assert code == EXIT_OK
        assert rows[0][0] == "Year"
        assert len(rows) == 29

    def test_csv_delimiter_from_config(self):
        """CSV delimiter comes from configuration."""
        config = EngineConfig(csv_delimiter=";")
        code, out = run(["estimate", "-f", "csv", "--csv-section", "line_items"], config)
        assert code == EXIT_OK
        assert out.splitlines()[0].startswith('"Category";"Description"')

    def test_preset(self):
        """Presets are selected by id."""
        code, out = run(["estimate", "--preset", "high-water", "-f", "json"])
        data = json.loads(out)
        assert code == EXIT_OK
        assert data["scenario_name"] == "High Water Treatment, Long Monitoring"
        assert data["results"]["total_duration_years"] == 53

    def test_input_file(self, tmp_path):
        """Scenario files are loaded with --input."""
        path = tmp_path / "site.yaml"
        path.write_text("scenario_name: Site C\nquantities:\n  tsf_area_ha: 0\n")
        code, out = run(["estimate", "--input", str(path), "-f", "json"])
        data = json.loads(out)
        assert code == EXIT_OK
        assert data["scenario_name"] == "Site C"
        categories = {item["category"] for item in data["results"]["line_items"]}
        assert "tsf_closure" not in categories

    def test_output_file(self, tmp_path):
        """--output writes to a file and leaves stdout empty."""
        path = tmp_path / "results.json"
        code, out = run(["estimate", "-f", "json", "-o", str(path)])
        assert code == EXIT_OK
        assert out == ""
        assert json.loads(path.read_text())["results"]["total_duration_years"] == 27

    def test_variation(self):
        """--variation changes sensitivity ranges."""
        code, out = run(["estimate", "-f", "json", "--variation", "20"])
        data = json.loads(out)
        area = next(
            s for s in data["results"]["sensitivity_results"]
            if s["driver_key"] == "disturbed_area"
        )
        assert code == EXIT_OK
        assert area["low_value"] == pytest.approx(400.0)

    def test_preset_and_input_exclusive(self, tmp_path):
        """--preset and --input cannot be combined."""
        with pytest.raises(SystemExit):
            run(["estimate", "-p", "tsf-dominant", "-i", str(tmp_path / "x.json")])


class TestEstimateErrors:
    """Test error exit codes."""

    def test_unknown_preset(self, caplog):
        code, out = run(["estimate", "--preset", "underground"])
        assert code == EXIT_ERROR
        assert out == ""
        assert "Unknown preset: underground" in caplog.text

    def test_invalid_variation(self):
        code, _ = run(["estimate", "--variation", "100"])
        assert code == EXIT_ERROR

    def test_negative_variation(self):
        code, _ = run(["estimate", "--variation", "-5"])
        assert code == EXIT_ERROR

    def test_invalid_input_file(self, tmp_path, caplog):
        """Each validation error is logged."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "quantities": {"tsf_area_ha": -1},
            "financial_params": {"discount_rate_percent": 50},
        }))
        code, _ = run(["estimate", "-i", str(path)])
        assert code == EXIT_ERROR
        assert "tsf_area_ha" in caplog.text
        assert "discount_rate_percent" in caplog.text

    def test_missing_input_file(self, tmp_path):
        code, _ = run(["estimate", "-i", str(tmp_path / "missing.yaml")])
        assert code == EXIT_ERROR

    def test_unwritable_output(self, tmp_path):
        code, _ = run(["estimate", "-o", str(tmp_path / "no" / "such" / "file.txt")])
        assert code == EXIT_ERROR

    def test_bad_format_choice(self):
        """argparse rejects unknown formats."""
        with pytest.raises(SystemExit):
            run(["estimate", "--format", "xml"])


class TestPresetsCommand:
    """Test the presets command."""

    def test_table(self):
        code, out = run(["presets"])
        lines = out.splitlines()
        assert code == EXIT_OK
        assert len(lines) == 4
        assert lines[0].startswith("small-open-pit")

    def test_json(self):
        code, out = run(["list", "--json"])
        data = json.loads(out)
        assert code == EXIT_OK
        assert [p["id"] for p in data] == [
            "small-open-pit", "large-open-pit-wrd", "tsf-dominant", "high-water",
        ]


class TestDefaultsCommand:
    """Test the defaults command."""

    def test_stdout(self):
        code, out = run(["defaults"])
        data = json.loads(out)
        assert code == EXIT_OK
        assert data["quantities"]["disturbed_area_ha"] == 500.0

    def test_file_round_trip(self, tmp_path):
        """Dumped defaults are accepted back by estimate --input."""
        path = tmp_path / "defaults.json"
        code, out = run(["defaults", "-o", str(path)])
        assert code == EXIT_OK
        assert out == ""

        code, out = run(["estimate", "-i", str(path), "-f", "json"])
        assert code == EXIT_OK
        assert json.loads(out)["results"]["total_duration_years"] == 27

    def test_unwritable(self, tmp_path):
        code, _ = run(["defaults", "-o", str(tmp_path / "no" / "defaults.json")])
        assert code == EXIT_ERROR
