"""Shared enums."""

from odmatrix.types.base import CurbApproach

__all__ = ["CurbApproach"]
