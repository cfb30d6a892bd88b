"""Configuration for odmatrix exports."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from enum import Enum


class UnresolvedLocationPolicy(str, Enum):
    """What to do with a table row that has no network location at all.

    Such a row is neither placed nor unplaced: the engine returned no location
    object for it. ``SKIP`` drops the row with a warning, ``ERROR`` aborts.
    """

    SKIP = "skip"
    ERROR = "error"

    @classmethod
    def from_string(cls, value: str) -> "UnresolvedLocationPolicy":
        """Parse a case-insensitive policy name.

        Raises:
            ValueError: If the name is not a known policy.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Invalid unresolved location policy '{value}'. Valid values are: {valid}"
            ) from None


@dataclass
class ExportConfig:
    """Settings for mapping, expansion and CSV emission."""

    # Text encoding of every CSV file; the original tool writes UTF-16 with BOM
    encoding: str = "utf-16"

    # Handling of location rows the engine cannot resolve
    unresolved_policy: UnresolvedLocationPolicy = UnresolvedLocationPolicy.SKIP

    # Passed to pandas; None keeps full float precision
    float_format: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.unresolved_policy, str) and not isinstance(
            self.unresolved_policy, UnresolvedLocationPolicy
        ):
            self.unresolved_policy = UnresolvedLocationPolicy.from_string(
                self.unresolved_policy
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown CSV encoding '{self.encoding}'") from None


# Global default configuration
EXPORT_CONFIG = ExportConfig()
