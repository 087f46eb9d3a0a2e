"""
Loading of session match rules from JSON configuration.
"""

import json
from pathlib import Path
from typing import Any, List, Union

import pydantic

from shared.errors import ConfigurationError
from shared.logging import get_logger
from .matcher import SessionMatchSpec
from .models import SessionMatchSpecConfig

logger = get_logger("session_properties.loader")


def parse_session_match_specs(data: Any) -> List[SessionMatchSpec]:
    """Validate a list of rule dicts into match specs, preserving order."""
    if not isinstance(data, list):
        raise ConfigurationError(
            "Session property rules must be a list",
            {"type": type(data).__name__}
        )

    specs = []
    for index, entry in enumerate(data):
        try:
            config = SessionMatchSpecConfig.model_validate(entry)
        except pydantic.ValidationError as e:
            raise ConfigurationError(
                "Invalid session property rule",
                {"index": index, "errors": e.errors(include_url=False, include_context=False)}
            ) from e
        specs.append(config.to_match_spec())
    return specs


def load_session_match_specs(path: Union[str, Path]) -> List[SessionMatchSpec]:
    """Read session match rules from a JSON file."""
    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError("Rules file not found", {"path": str(file_path)})

    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError("Cannot read rules file", {"path": str(file_path), "error": str(e)}) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError("Invalid JSON in rules file", {"path": str(file_path), "error": str(e)}) from e

    specs = parse_session_match_specs(data)
    logger.info("Session property rules loaded", path=str(file_path), rules=len(specs))
    return specs
