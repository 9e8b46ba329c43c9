"""
inputs/loader.py - Scenario file loading.

Reads JSON or YAML scenario files and validates them into an InputState.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..errors import InputValidationError
from .schema import InputState
from .validation import validate_input_state

logger = logging.getLogger(__name__)


def read_scenario_data(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Parse a scenario file into plain data.

    Format is chosen by suffix: .json, .yaml or .yml.

    Raises:
        InputValidationError: If the file cannot be read or parsed, or is
            not a mapping
    """
    path = Path(path)
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(
            [f"{path}: cannot read scenario file ({exc.strerror or exc})"],
            source="inputs/loader",
        ) from exc

    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            raise InputValidationError(
                [f"{path.name}: unsupported scenario format '{suffix}'"],
                source="inputs/loader",
            )
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise InputValidationError(
            [f"{path.name}: {exc}"], source="inputs/loader"
        ) from exc

    if not isinstance(data, dict):
        raise InputValidationError(
            [f"{path.name}: top-level value must be a mapping"],
            source="inputs/loader",
        )
    return data


def load_input_state(path: Union[str, Path]) -> InputState:
    """Load and validate a scenario file."""
    data = read_scenario_data(path)
    inputs = validate_input_state(data)
    logger.info(f"Loaded scenario '{inputs.scenario_name}' from {path}")
    return inputs


def dump_input_state(inputs: InputState, path: Union[str, Path]) -> None:
    """Write an InputState as JSON or YAML, chosen by suffix."""
    path = Path(path)
    data = inputs.to_dict()
    if path.suffix.lower() in (".yaml", ".yml"):
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    else:
        text = json.dumps(data, indent=2)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Saved scenario '{inputs.scenario_name}' to {path}")
