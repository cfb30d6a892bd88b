"""Layer file parsing."""

from odmatrix.dsl.loader import load_layer_yaml

__all__ = ["load_layer_yaml"]
