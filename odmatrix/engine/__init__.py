"""Network analysis engine collaborators."""

from odmatrix.engine.base import CostMatrixEngine
from odmatrix.engine.layer import LayerFileEngine
from odmatrix.engine.session import EngineSession, engine_session, open_layer

__all__ = [
    "CostMatrixEngine",
    "LayerFileEngine",
    "EngineSession",
    "engine_session",
    "open_layer",
]
