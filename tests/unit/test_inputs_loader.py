"""
tests/unit/test_inputs_loader.py - Tests for scenario file loading.
"""

import json

import pytest
from closurecost.errors import InputValidationError
from closurecost.inputs.defaults import DEFAULT_INPUT_STATE
from closurecost.inputs.loader import dump_input_state, load_input_state, read_scenario_data


class TestLoad:
    """Tests for load_input_state."""

    def test_json(self, tmp_path):
        """JSON scenario files load and validate."""
        path = tmp_path / "site.json"
        path.write_text(json.dumps({"scenario_name": "Site A", "quantities": {"tsf_area_ha": 80}}))
        inputs = load_input_state(path)
        assert inputs.scenario_name == "Site A"
        assert inputs.quantities.tsf_area_ha == 80.0

    def test_yaml(self, tmp_path):
        """YAML scenario files load and validate."""
        path = tmp_path / "site.yaml"
        path.write_text(
            "scenario_name: Site B\n"
            "quantities:\n"
            "  monitoring_intensity: high\n"
            "phase_durations:\n"
            "  water_management: 20\n"
        )
        inputs = load_input_state(path)
        assert inputs.scenario_name == "Site B"
        assert inputs.phase_durations.water_management == 20

    def test_invalid_values(self, tmp_path):
        """Out-of-range file values raise InputValidationError."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"financial_params": {"discount_rate_percent": 99}}))
        with pytest.raises(InputValidationError):
            load_input_state(path)


class TestReadScenarioData:
    """Tests for read_scenario_data error handling."""

    def test_malformed_json(self, tmp_path):
        """Malformed JSON is a validation error."""
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(InputValidationError, match="bad.json"):
            read_scenario_data(path)

    def test_malformed_yaml(self, tmp_path):
        """Malformed YAML is a validation error."""
        path = tmp_path / "bad.yml"
        path.write_text("quantities: [unclosed\n")
        with pytest.raises(InputValidationError):
            read_scenario_data(path)

    def test_unsupported_suffix(self, tmp_path):
        """Only .json, .yaml and .yml are accepted."""
        path = tmp_path / "site.toml"
        path.write_text("x = 1\n")
        with pytest.raises(InputValidationError, match="unsupported"):
            read_scenario_data(path)

    def test_non_mapping(self, tmp_path):
        """Top level must be a mapping."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(InputValidationError, match="mapping"):
            read_scenario_data(path)

    def test_missing_file(self, tmp_path):
        """Missing files are reported as validation errors."""
        with pytest.raises(InputValidationError, match="cannot read"):
            read_scenario_data(tmp_path / "missing.json")


class TestDump:
    """Tests for dump_input_state."""

    @pytest.mark.parametrize("name", ["scenario.json", "scenario.yaml"])
    def test_dump_then_load(self, tmp_path, name):
        """A dumped scenario loads back unchanged."""
        path = tmp_path / name
        dump_input_state(DEFAULT_INPUT_STATE, path)
        assert load_input_state(path) == DEFAULT_INPUT_STATE
