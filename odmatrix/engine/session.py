"""Scoped engine session.

The engine keeps process-wide state. It is acquired once before any core call
and released once afterwards, whether or not the run succeeded.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from odmatrix.engine.layer import LayerFileEngine
from odmatrix.logging import get_logger

logger = get_logger(__name__)

_ACTIVE_SESSION: Optional["EngineSession"] = None


class EngineSession:
    """Handle for the process-wide engine state."""

    def __init__(self, label: str = "odmatrix") -> None:
        self.label = label
        self.active = False

    def acquire(self) -> None:
        global _ACTIVE_SESSION
        if _ACTIVE_SESSION is not None:
            raise RuntimeError(
                f"Engine session '{_ACTIVE_SESSION.label}' is already active; "
                "sessions cannot be nested"
            )
        _ACTIVE_SESSION = self
        self.active = True
        logger.debug(f"Engine session '{self.label}' acquired")

    def release(self) -> None:
        global _ACTIVE_SESSION
        if not self.active:
            return
        self.active = False
        if _ACTIVE_SESSION is self:
            _ACTIVE_SESSION = None
        logger.debug(f"Engine session '{self.label}' released")


def active_session() -> Optional[EngineSession]:
    """Return the session currently holding the engine, if any."""
    return _ACTIVE_SESSION


@contextmanager
def engine_session(label: str = "odmatrix") -> Iterator[EngineSession]:
    """Hold the engine for the duration of the ``with`` block."""
    session = EngineSession(label)
    session.acquire()
    try:
        yield session
    finally:
        session.release()


@contextmanager
def open_layer(path: Path) -> Iterator[LayerFileEngine]:
    """Open a layer file inside an engine session."""
    path = Path(path)
    with engine_session(label=path.name):
        yield LayerFileEngine.from_file(path)
