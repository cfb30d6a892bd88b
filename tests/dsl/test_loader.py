"""Tests for layer YAML loading and schema validation."""

import pytest

from odmatrix.dsl.loader import load_layer_yaml
from odmatrix.errors import UnresolvableSourceError


def test_loads_sample_layer(sample_layer_path) -> None:
    data = load_layer_yaml(sample_layer_path.read_text(encoding="utf-8"))
    assert data["layer"]["type"] == "od_cost_matrix"
    assert len(data["origins"]["rows"]) == 5


def test_invalid_yaml() -> None:
    with pytest.raises(UnresolvableSourceError, match="valid YAML"):
        load_layer_yaml("layer: [unclosed", source="broken.yaml")


def test_top_level_must_be_mapping() -> None:
    with pytest.raises(UnresolvableSourceError, match="dictionary"):
        load_layer_yaml("- a\n- b\n")


def test_missing_layer_section() -> None:
    with pytest.raises(UnresolvableSourceError, match="network analysis layer"):
        load_layer_yaml("origins: {rows: []}\n")


def test_empty_document() -> None:
    with pytest.raises(UnresolvableSourceError, match="network analysis layer"):
        load_layer_yaml("")


def test_location_table_must_be_mapping() -> None:
    with pytest.raises(UnresolvableSourceError, match="'origins' must be a mapping"):
        load_layer_yaml("layer: {type: od_cost_matrix}\norigins: [1, 2]\n")


def test_unknown_top_level_key_rejected() -> None:
    with pytest.raises(UnresolvableSourceError, match="failed validation"):
        load_layer_yaml("layer: {type: od_cost_matrix}\nroutes: []\n")


def test_schema_error_reports_path() -> None:
    text = (
        "layer: {type: od_cost_matrix}\n"
        "result:\n"
        "  values:\n"
        "    - {origin: -1, destination: 0, costs: [1.0]}\n"
    )
    with pytest.raises(UnresolvableSourceError, match="result/values/0/origin"):
        load_layer_yaml(text)


def test_position_outside_edge_rejected() -> None:
    text = (
        "layer: {type: od_cost_matrix}\n"
        "origins:\n"
        "  fields: [Name, CurbApproach]\n"
        "  rows:\n"
        "    - {Name: A, location: {located: true, edge: 1, position: 1.5}}\n"
    )
    with pytest.raises(UnresolvableSourceError, match="origins/rows/0/location/position"):
        load_layer_yaml(text)
