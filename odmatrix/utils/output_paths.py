"""Utilities for building CSV artifact output paths.

Artifacts are named after the layer file and placed next to it unless an
output directory is given:
``<layer stem>_ODCost<Matrix|FlatTable>_<attribute description>.csv``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

MATRIX = "Matrix"
FLAT_TABLE = "FlatTable"

ARTIFACT_NAME_FORMAT = "{prefix}_ODCost{kind}_{description}.csv"


def layer_prefix_from_path(layer_path: Path) -> str:
    """Return the layer filename stem used as the artifact prefix."""
    return layer_path.stem


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def output_dir_for_layer(layer_path: Path, output_dir: Optional[Path]) -> Path:
    """Return ``output_dir`` or, when it is None, the layer's own folder."""
    if output_dir is not None:
        return output_dir
    return layer_path.resolve().parent


def build_artifact_path(
    layer_path: Path, output_dir: Optional[Path], kind: str, description: str
) -> Path:
    """Compose the path of one CSV artifact.

    Args:
        layer_path: Input layer file.
        output_dir: Optional base directory; defaults to the layer's folder.
        kind: ``MATRIX`` or ``FLAT_TABLE``.
        description: Attribute description, e.g. ``OptimizedOn_Minutes``.

    Returns:
        The composed path.
    """
    if kind not in (MATRIX, FLAT_TABLE):
        raise ValueError(f"Unknown artifact kind '{kind}'")
    name = ARTIFACT_NAME_FORMAT.format(
        prefix=layer_prefix_from_path(layer_path), kind=kind, description=description
    )
    return output_dir_for_layer(layer_path, output_dir) / name
