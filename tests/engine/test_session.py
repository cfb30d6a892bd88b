"""Tests for the scoped engine session."""

import pytest

from odmatrix.engine.layer import LayerFileEngine
from odmatrix.engine.session import active_session, engine_session, open_layer


def test_session_released_after_block() -> None:
    with engine_session("test") as session:
        assert active_session() is session
        assert session.active
    assert active_session() is None
    assert not session.active


def test_session_released_on_error() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with engine_session():
            raise RuntimeError("boom")
    assert active_session() is None


def test_nested_sessions_rejected() -> None:
    with engine_session("outer"):
        with pytest.raises(RuntimeError, match="already active"):
            with engine_session("inner"):
                pass
    assert active_session() is None


def test_open_layer_yields_engine(sample_layer_path) -> None:
    with open_layer(sample_layer_path) as engine:
        assert isinstance(engine, LayerFileEngine)
        assert active_session() is not None
        assert active_session().label == "downtown.yaml"
    assert active_session() is None


def test_open_layer_releases_when_loading_fails(tmp_path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("layer: [", encoding="utf-8")
    with pytest.raises(ValueError):
        with open_layer(bad):
            pass
    assert active_session() is None
