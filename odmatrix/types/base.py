"""Base enums for cost matrix handling."""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class CurbApproach(IntEnum):
    """Side of the network edge from which a location may be approached.

    Part of a placement key: the same network position approached from a
    different side resolves to a different internal matrix index.
    """

    EITHER_SIDE = 0
    RIGHT_SIDE = 1
    LEFT_SIDE = 2
    NO_U_TURN = 3

    @classmethod
    def parse(cls, value: Union[int, str, "CurbApproach"]) -> "CurbApproach":
        """Parse an integer code or a case-insensitive member name.

        Raises:
            ValueError: If the value matches no member.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid curb approach {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        valid = ", ".join(f"{e.name}={e.value}" for e in cls)
        raise ValueError(
            f"Invalid curb approach {value!r}. Valid values are: {valid}"
        )
