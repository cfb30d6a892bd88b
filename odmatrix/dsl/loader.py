"""YAML loader + schema validation for layer files.

Parses a layer document, runs early shape checks that give friendlier messages
than the schema, validates against the packaged JSON schema and returns a plain
dictionary for :class:`odmatrix.engine.layer.LayerFileEngine`.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

from odmatrix.errors import UnresolvableSourceError


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("odmatrix.schemas")
        .joinpath("layer.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_layer_yaml(yaml_str: str, source: str = "<string>") -> Dict[str, Any]:
    """Load and validate a layer YAML string.

    Args:
        yaml_str: Layer document text.
        source: Name used in error messages (usually the file path).

    Returns:
        The validated layer dictionary.

    Raises:
        UnresolvableSourceError: If the text is not valid YAML or does not
            describe a layer.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise UnresolvableSourceError(
            f"Unable to open layer file: {source}. Make sure it is valid YAML.\n"
            f"Error type: {type(exc).__name__}\n"
            f"Error message: {exc}"
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise UnresolvableSourceError(
            f"Layer file {source} must map to a dictionary at top-level."
        )
    if "layer" not in data:
        raise UnresolvableSourceError(
            f"Unable to get a network analysis layer from layer file: {source}. "
            "Is your file a network analysis layer?"
        )

    for table in ("origins", "destinations"):
        section = data.get(table)
        if section is not None and not isinstance(section, dict):
            raise UnresolvableSourceError(
                f"'{table}' must be a mapping with 'fields' and 'rows'"
            )

    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise UnresolvableSourceError(
            f"Layer file {source} failed validation at '{location}': {exc.message}"
        ) from exc

    return data
