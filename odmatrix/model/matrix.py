"""Cost matrix containers.

``SparseCostMatrix`` is the solver's deduplicated result, indexed by internal
origin and destination indices. ``DenseCostMatrix`` is the expanded output
with one row per origin name and one column per destination name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd


@dataclass(frozen=True, eq=False)
class SparseCostMatrix:
    """Read-only cost matrix over unique placed locations.

    Attributes:
        attribute_names: Cost attribute names. The first is the impedance the
            solver optimized on, the rest are accumulated attributes.
        values: Array of shape ``(origins, destinations, attributes)``.
        default_values: Per-attribute cost used when either endpoint is
            unplaced.
    """

    attribute_names: tuple[str, ...]
    values: np.ndarray
    default_values: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "attribute_names", tuple(self.attribute_names))
        values = np.array(self.values, dtype=float)
        defaults = np.array(self.default_values, dtype=float).reshape(-1)
        if values.ndim != 3:
            raise ValueError(
                f"values must be 3-dimensional (origin, destination, attribute), "
                f"got shape {values.shape}"
            )
        attribute_count = len(self.attribute_names)
        if values.shape[2] != attribute_count:
            raise ValueError(
                f"values carry {values.shape[2]} attributes but "
                f"{attribute_count} attribute names were given"
            )
        if defaults.shape[0] != attribute_count:
            raise ValueError(
                f"Expected {attribute_count} default values, got {defaults.shape[0]}"
            )
        values.setflags(write=False)
        defaults.setflags(write=False)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "default_values", defaults)

    @classmethod
    def from_entries(
        cls,
        attribute_names: Sequence[str],
        default_values: Sequence[float],
        origin_count: int,
        destination_count: int,
        entries: Iterable[Mapping[str, Any]] = (),
    ) -> "SparseCostMatrix":
        """Build a matrix from ``{origin, destination, costs}`` records.

        Cells without an entry hold the attribute's default value.

        Raises:
            ValueError: If an entry is out of range or has the wrong number of
                costs.
        """
        attribute_count = len(attribute_names)
        if origin_count < 0 or destination_count < 0:
            raise ValueError("origin_count and destination_count must be >= 0")
        if len(default_values) != attribute_count:
            raise ValueError(
                f"Expected {attribute_count} default values, got {len(default_values)}"
            )
        values = np.empty((origin_count, destination_count, attribute_count))
        values[...] = np.asarray(default_values, dtype=float)
        for entry in entries:
            o = int(entry["origin"])
            d = int(entry["destination"])
            costs = list(entry["costs"])
            if not (0 <= o < origin_count and 0 <= d < destination_count):
                raise ValueError(
                    f"Entry ({o}, {d}) is outside the {origin_count} x "
                    f"{destination_count} matrix"
                )
            if len(costs) != attribute_count:
                raise ValueError(
                    f"Entry ({o}, {d}) has {len(costs)} costs, expected {attribute_count}"
                )
            values[o, d, :] = costs
        return cls(tuple(attribute_names), values, np.asarray(default_values))

    @property
    def attribute_count(self) -> int:
        return len(self.attribute_names)

    @property
    def unique_origin_count(self) -> int:
        return int(self.values.shape[0])

    @property
    def unique_destination_count(self) -> int:
        return int(self.values.shape[1])

    @property
    def impedance_attribute(self) -> Optional[str]:
        return self.attribute_names[0] if self.attribute_names else None

    @property
    def accumulated_attributes(self) -> List[str]:
        return list(self.attribute_names[1:])

    def value(self, origin: int, destination: int, attribute: int) -> float:
        """Return the cost between two internal indices for one attribute."""
        if origin < 0 or destination < 0:
            raise IndexError(
                f"Internal indices must be non-negative, got ({origin}, {destination})"
            )
        return float(self.values[origin, destination, attribute])

    def default_value(self, attribute: int) -> float:
        return float(self.default_values[attribute])


@dataclass
class DenseCostMatrix:
    """Expanded costs for one attribute.

    Attributes:
        attribute_name: Cost attribute the values belong to.
        is_impedance: True for the first (optimized) attribute.
        origin_names: Row labels, one per origin location.
        destination_names: Column labels, one per destination location.
        values: Array of shape ``(len(origin_names), len(destination_names))``.
    """

    attribute_name: str
    is_impedance: bool
    origin_names: List[Optional[str]]
    destination_names: List[Optional[str]]
    values: np.ndarray

    @property
    def shape(self) -> tuple[int, int]:
        return (len(self.origin_names), len(self.destination_names))

    @property
    def description(self) -> str:
        """Attribute label used in output file names."""
        prefix = "OptimizedOn" if self.is_impedance else "AccumulationOf"
        return f"{prefix}_{self.attribute_name}"

    def to_frame(self) -> pd.DataFrame:
        """Return the matrix as a DataFrame labelled by location names."""
        return pd.DataFrame(
            self.values,
            index=pd.Index(self.origin_names, name="Name"),
            columns=list(self.destination_names),
        )
