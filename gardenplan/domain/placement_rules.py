"""Placement edits on a workspace value, independent from caches and HTTP.

Every function takes a Workspace and returns a new Workspace. Inputs are never
modified; zones that an edit does not touch are passed through as-is.

Rule of thumb:
- OK: lookups, validation, building new values.
- Not OK: generating ids, touching the cache, logging requests.
"""

from collections import Counter
from typing import Callable, Iterable, List

from gardenplan.domain.errors import PlacementNotFound, ZoneNotFound
from gardenplan.models.workspace_models import (
    Item,
    ItemPlacement,
    Position,
    Workspace,
    Zone,
)


# ==============================================================================
# ==== Lookups =================================================================
# ==============================================================================


def find_zone(workspace: Workspace, zone_id: str) -> Zone:
    """Return the zone with ``zone_id`` or raise ZoneNotFound."""
    for zone in workspace.zones:
        if zone.id == zone_id:
            return zone
    raise ZoneNotFound(zone_id, workspace.id)


def find_placement(zone: Zone, placement_id: str) -> ItemPlacement:
    """Return the placement with ``placement_id`` inside ``zone`` or raise PlacementNotFound."""
    for placement in zone.placements:
        if placement.id == placement_id:
            return placement
    raise PlacementNotFound(placement_id, zone.id)


def placement_ids(workspace: Workspace) -> List[str]:
    return [p.id for zone in workspace.zones for p in zone.placements]


def check_workspace_consistency(workspace: Workspace) -> List[str]:
    """Return a list of invariant violations (empty when the workspace is consistent).

    Checked: every placement points at the zone that holds it, placement ids
    are unique across the workspace and zone ids are unique.
    """
    problems = []
    for zone in workspace.zones:
        for placement in zone.placements:
            if placement.source_zone_id != zone.id:
                problems.append(
                    f"placement {placement.id} is in zone {zone.id} "
                    f"but points at {placement.source_zone_id}"
                )
    for placement_id, count in Counter(placement_ids(workspace)).items():
        if count > 1:
            problems.append(f"placement id {placement_id} used {count} times")
    for zone_id, count in Counter(zone.id for zone in workspace.zones).items():
        if count > 1:
            problems.append(f"zone id {zone_id} used {count} times")
    return problems


# ==============================================================================
# ==== Builders ================================================================
# ==============================================================================


def _replace_zones(
    workspace: Workspace, zone_ids: Iterable[str], edit: Callable[[Zone], Zone]
) -> Workspace:
    targets = set(zone_ids)
    zones = tuple(edit(zone) if zone.id in targets else zone for zone in workspace.zones)
    return workspace.model_copy(update={"zones": zones})


def _append(zone: Zone, placement: ItemPlacement) -> Zone:
    return zone.model_copy(update={"placements": zone.placements + (placement,)})


def _without(zone: Zone, placement_id: str) -> Zone:
    placements = tuple(p for p in zone.placements if p.id != placement_id)
    return zone.model_copy(update={"placements": placements})


# ==============================================================================
# ==== Edits ===================================================================
# ==============================================================================


def add_placement(
    workspace: Workspace,
    zone_id: str,
    item: Item,
    x: float,
    y: float,
    placement_id: str,
) -> Workspace:
    """Append a new placement of ``item`` at (x, y) to the zone."""
    find_zone(workspace, zone_id)
    placement = ItemPlacement(
        id=placement_id,
        position=Position(x=x, y=y),
        source_zone_id=zone_id,
        item=item,
    )
    return _replace_zones(workspace, [zone_id], lambda zone: _append(zone, placement))


def move_placement_within_zone(
    workspace: Workspace, zone_id: str, placement_id: str, x: float, y: float
) -> Workspace:
    """Set a new position on a placement, keeping its zone and identity.

    A placement id that is not in the zone leaves the workspace unchanged.
    """
    find_zone(workspace, zone_id)
    position = Position(x=x, y=y)

    def move(zone: Zone) -> Zone:
        placements = tuple(
            p.model_copy(update={"position": position}) if p.id == placement_id else p
            for p in zone.placements
        )
        return zone.model_copy(update={"placements": placements})

    return _replace_zones(workspace, [zone_id], move)


def move_placement_between_zones(
    workspace: Workspace,
    source_zone_id: str,
    target_zone_id: str,
    placement_id: str,
    x: float,
    y: float,
) -> Workspace:
    """Take a placement out of the source zone and append it to the target zone.

    The placement keeps its id; position and source_zone_id are rewritten.
    Both zones change in the one returned value. When source and target are
    the same zone the placement moves to the end of that zone.
    """
    placement = find_placement(find_zone(workspace, source_zone_id), placement_id)
    find_zone(workspace, target_zone_id)
    moved = placement.model_copy(
        update={"position": Position(x=x, y=y), "source_zone_id": target_zone_id}
    )

    def move(zone: Zone) -> Zone:
        if zone.id == source_zone_id:
            zone = _without(zone, placement_id)
        if zone.id == target_zone_id:
            zone = _append(zone, moved)
        return zone

    return _replace_zones(workspace, [source_zone_id, target_zone_id], move)


def remove_placement(workspace: Workspace, zone_id: str, placement_id: str) -> Workspace:
    """Drop the placement with ``placement_id`` from the zone (no-op if absent)."""
    find_zone(workspace, zone_id)
    return _replace_zones(workspace, [zone_id], lambda zone: _without(zone, placement_id))


def clone_placement(
    workspace: Workspace,
    source_zone_id: str,
    target_zone_id: str,
    source_placement_id: str,
    x: float,
    y: float,
    placement_id: str,
) -> Workspace:
    """Append a copy of a placement's item to the target zone under a new id.

    The source placement stays where it is.
    """
    source = find_placement(find_zone(workspace, source_zone_id), source_placement_id)
    find_zone(workspace, target_zone_id)
    clone = source.model_copy(
        update={
            "id": placement_id,
            "position": Position(x=x, y=y),
            "source_zone_id": target_zone_id,
        }
    )
    return _replace_zones(workspace, [target_zone_id], lambda zone: _append(zone, clone))
