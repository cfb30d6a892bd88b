"""Build internal-index-to-name mappings for origins and destinations."""

from __future__ import annotations

from typing import Callable, Iterable, Union

from odmatrix.config import UnresolvedLocationPolicy
from odmatrix.errors import UnresolvableSourceError
from odmatrix.logging import get_logger
from odmatrix.model.location import UNPLACED, Location, Placed, PlacementKey
from odmatrix.model.mapping import IndexMapping

logger = get_logger(__name__)

#: ``(placement_key, is_origin) -> internal index``
IndexLookup = Callable[[PlacementKey, bool], int]


def build_mapping(
    locations: Iterable[Location],
    is_origin: bool,
    index_lookup: IndexLookup,
    unresolved_policy: Union[
        UnresolvedLocationPolicy, str
    ] = UnresolvedLocationPolicy.SKIP,
) -> IndexMapping:
    """Group location names by the internal matrix index they resolve to.

    Unplaced locations are grouped under ``UNPLACED`` without consulting the
    lookup. Names are appended in input order.

    Args:
        locations: Location rows in table order.
        is_origin: Role passed through to ``index_lookup``.
        index_lookup: Engine capability resolving a placement key to an index.
        unresolved_policy: Handling of rows with no network location.

    Returns:
        The mapping. It may be empty; expansion rejects empty mappings.

    Raises:
        UnresolvableSourceError: If a row is unresolvable and the policy is
            ``ERROR``.
    """
    if isinstance(unresolved_policy, str) and not isinstance(
        unresolved_policy, UnresolvedLocationPolicy
    ):
        unresolved_policy = UnresolvedLocationPolicy.from_string(unresolved_policy)

    mapping = IndexMapping(is_origin=is_origin)
    skipped = 0
    for row, location in enumerate(locations):
        if not location.resolved:
            if unresolved_policy is UnresolvedLocationPolicy.ERROR:
                raise UnresolvableSourceError(
                    f"{mapping.role.capitalize()} row {row} ('{location.name}') has no "
                    f"network location; expected a placed or unplaced location"
                )
            logger.warning(
                f"Skipping {mapping.role} row {row} ('{location.name}'): no network location"
            )
            skipped += 1
            continue

        if not location.is_placed:
            mapping.add(UNPLACED, location.name)
            continue

        # Location rejects a placed row without a key
        assert location.placement_key is not None
        index = index_lookup(location.placement_key, is_origin)
        mapping.add(Placed(index), location.name)

    logger.debug(
        f"Mapped {mapping.name_count} {mapping.role} name(s) onto "
        f"{mapping.group_count} internal index group(s)"
        + (f", skipped {skipped}" if skipped else "")
    )
    return mapping
