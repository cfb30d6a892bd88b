"""Engine backed by a layer file.

A layer file records a solved origin-destination cost matrix product: the
deduplicated result, the index table the solver used to assign internal
indices, and the origin/destination tables with their placement status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from odmatrix.dsl.loader import load_layer_yaml
from odmatrix.errors import UnresolvableSourceError
from odmatrix.logging import get_logger
from odmatrix.model.location import Location, PlacementKey
from odmatrix.model.matrix import SparseCostMatrix
from odmatrix.types.base import CurbApproach

logger = get_logger(__name__)

OD_COST_MATRIX = "od_cost_matrix"

#: Fields every location table must declare.
REQUIRED_FIELDS = ("Name", "CurbApproach")


def _role_table(is_origin: bool) -> str:
    return "origins" if is_origin else "destinations"


class LayerFileEngine:
    """Read-only engine over a parsed layer document.

    Args:
        data: Validated layer dictionary (see ``load_layer_yaml``).
        source: Name of the layer, used in error messages.
    """

    def __init__(self, data: Dict[str, Any], source: str = "<layer>") -> None:
        self.source = source
        self._data = data
        self._check_layer()
        self._index_tables: Dict[bool, Dict[PlacementKey, int]] = {}

    @classmethod
    def from_file(cls, path: Path) -> "LayerFileEngine":
        path = Path(path)
        logger.info(f"Opening layer file: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise UnresolvableSourceError(
                f"Unable to open layer file: {path}. Make sure it exists and is valid.\n"
                f"Error type: {type(exc).__name__}\n"
                f"Error message: {exc}"
            ) from exc
        return cls(load_layer_yaml(text, source=str(path)), source=str(path))

    @property
    def name(self) -> str:
        return str(self._data["layer"].get("name") or Path(self.source).stem)

    def _check_layer(self) -> None:
        layer = self._data["layer"]
        if layer.get("type") != OD_COST_MATRIX:
            raise UnresolvableSourceError(
                f"Input layer '{self.source}' must be an Origin-Destination Cost Matrix "
                f"layer, got type '{layer.get('type')}'."
            )
        if layer.get("solver") != OD_COST_MATRIX:
            raise UnresolvableSourceError(
                f"Unable to get an OD cost matrix solver from layer '{self.source}'. "
                "Is your layer an OD layer?"
            )

    @property
    def _result(self) -> Optional[Dict[str, Any]]:
        return self._data.get("result")

    def has_valid_result(self) -> bool:
        result = self._result
        if not result:
            return False
        return bool(result.get("valid", False)) and result.get("matrix_type") != "none"

    def solve(self) -> None:
        """Layer files carry results only; an unsolved layer cannot be used.

        Raises:
            UnresolvableSourceError: Always, listing any recorded solver
                messages.
        """
        result = self._result or {}
        messages = result.get("messages") or []
        detail = "\n".join(f"Message {i}: {m}" for i, m in enumerate(messages))
        raise UnresolvableSourceError(
            f"Valid result could not be generated for layer '{self.source}'. "
            "Solve the layer in the network analysis engine first."
            + (f"\nRecorded solver messages are as follows:\n{detail}" if detail else "")
        )

    def cost_matrix(self) -> SparseCostMatrix:
        if not self.has_valid_result():
            raise UnresolvableSourceError(
                f"Layer '{self.source}' has no valid solved result"
            )
        result = self._result
        # has_valid_result() is False when result is missing
        assert result is not None
        attributes = list(result.get("cost_attributes") or [])
        defaults = list(result.get("default_values") or [])
        if len(defaults) != len(attributes):
            raise UnresolvableSourceError(
                f"Layer '{self.source}' lists {len(attributes)} cost attribute(s) but "
                f"{len(defaults)} default value(s); expected one default per attribute"
            )
        try:
            return SparseCostMatrix.from_entries(
                attribute_names=attributes,
                default_values=defaults,
                origin_count=int(result.get("origin_count", 0)),
                destination_count=int(result.get("destination_count", 0)),
                entries=result.get("values") or [],
            )
        except ValueError as exc:
            raise UnresolvableSourceError(
                f"Invalid cost matrix in layer '{self.source}': {exc}"
            ) from exc

    def _table(self, is_origin: bool) -> Dict[str, Any]:
        name = _role_table(is_origin)
        table = self._data.get(name)
        if table is None:
            raise UnresolvableSourceError(
                f"Unable to get {name.capitalize()} table from layer '{self.source}'"
            )
        fields = table.get("fields") or []
        if any(f not in fields for f in REQUIRED_FIELDS):
            raise UnresolvableSourceError(
                f"CurbApproach and Name fields must be present on the "
                f"{name.capitalize()} table, found {fields}"
            )
        return table

    def locations(self, is_origin: bool) -> List[Location]:
        table = self._table(is_origin)
        locations: List[Location] = []
        for row in table["rows"]:
            raw_name = row.get("Name")
            name = None if raw_name is None else str(raw_name)
            network_location = row.get("location")
            if network_location is None:
                locations.append(Location(name=name, resolved=False))
                continue
            if not network_location["located"]:
                locations.append(Location(name=name))
                continue
            try:
                key = PlacementKey(
                    edge_id=int(network_location["edge"]),
                    position=float(network_location["position"]),
                    curb_approach=CurbApproach.parse(row.get("CurbApproach", 0)),
                )
            except (KeyError, ValueError) as exc:
                raise UnresolvableSourceError(
                    f"{_role_table(is_origin).capitalize()} row '{name}' is located "
                    f"but has an incomplete placement: {exc}"
                ) from exc
            locations.append(Location(name=name, is_placed=True, placement_key=key))
        return locations

    def _index_table(self, is_origin: bool) -> Dict[PlacementKey, int]:
        if is_origin not in self._index_tables:
            result = self._result or {}
            entries = result.get("origin_index" if is_origin else "destination_index")
            table: Dict[PlacementKey, int] = {}
            for entry in entries or []:
                key = PlacementKey(
                    edge_id=int(entry["edge"]),
                    position=float(entry["position"]),
                    curb_approach=CurbApproach.parse(entry.get("curb_approach", 0)),
                )
                table[key] = int(entry["index"])
            self._index_tables[is_origin] = table
        return self._index_tables[is_origin]

    def find_index(self, placement_key: PlacementKey, is_origin: bool) -> int:
        try:
            return self._index_table(is_origin)[placement_key]
        except KeyError:
            role = "origin" if is_origin else "destination"
            raise UnresolvableSourceError(
                f"No internal {role} index for placement {placement_key} in layer "
                f"'{self.source}'"
            ) from None
