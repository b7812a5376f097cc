from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import make_item, make_workspace
from gardenplan.domain import placement_rules
from gardenplan.domain.errors import PlacementNotFound, ZoneNotFound


def _zone(workspace, zone_id):
    return placement_rules.find_zone(workspace, zone_id)


def test_add_placement_appends_to_zone_without_touching_input():
    workspace = make_workspace(zones={"z1": ["p1"], "z2": []})

    updated = placement_rules.add_placement(workspace, "z1", make_item("plant_basil"), 1, 2, "p2")

    assert [p.id for p in _zone(updated, "z1").placements] == ["p1", "p2"]
    new = _zone(updated, "z1").placements[-1]
    assert (new.position.x, new.position.y) == (1, 2)
    assert new.source_zone_id == "z1"
    assert new.item.id == "plant_basil"
    # input value is left as it was
    assert [p.id for p in _zone(workspace, "z1").placements] == ["p1"]
    # untouched zones are shared
    assert _zone(updated, "z2") is _zone(workspace, "z2")


def test_add_placement_unknown_zone_raises():
    workspace = make_workspace()

    with pytest.raises(ZoneNotFound) as exc_info:
        placement_rules.add_placement(workspace, "missing", make_item(), 0, 0, "p1")
    assert exc_info.value.zone_id == "missing"
    assert exc_info.value.workspace_id == "grdn_1"


def test_move_within_zone_changes_position_only():
    workspace = make_workspace(zones={"z1": ["p1", "p2"], "z2": []})

    updated = placement_rules.move_placement_within_zone(workspace, "z1", "p2", 5, 6)

    moved = placement_rules.find_placement(_zone(updated, "z1"), "p2")
    assert (moved.position.x, moved.position.y) == (5, 6)
    assert moved.source_zone_id == "z1"
    assert moved.item == make_item()
    assert [p.id for p in _zone(updated, "z1").placements] == ["p1", "p2"]


def test_move_within_zone_missing_placement_is_noop():
    workspace = make_workspace(zones={"z1": ["p1"], "z2": []})

    updated = placement_rules.move_placement_within_zone(workspace, "z1", "nope", 5, 6)

    assert updated == workspace


def test_move_between_zones_keeps_identity():
    workspace = make_workspace(zones={"z1": ["p1"], "z2": ["p2"]})

    updated = placement_rules.move_placement_between_zones(workspace, "z1", "z2", "p1", 7, 8)

    assert _zone(updated, "z1").placements == ()
    assert [p.id for p in _zone(updated, "z2").placements] == ["p2", "p1"]
    moved = _zone(updated, "z2").placements[-1]
    assert (moved.position.x, moved.position.y) == (7, 8)
    assert moved.source_zone_id == "z2"
    assert placement_rules.check_workspace_consistency(updated) == []


def test_move_between_zones_same_zone_moves_to_end():
    workspace = make_workspace(zones={"z1": ["p1", "p2"]})

    updated = placement_rules.move_placement_between_zones(workspace, "z1", "z1", "p1", 3, 3)

    assert [p.id for p in _zone(updated, "z1").placements] == ["p2", "p1"]
    assert _zone(updated, "z1").placements[-1].position.x == 3


def test_move_between_zones_validation():
    workspace = make_workspace(zones={"z1": ["p1"], "z2": []})

    with pytest.raises(PlacementNotFound):
        placement_rules.move_placement_between_zones(workspace, "z2", "z1", "p1", 0, 0)
    with pytest.raises(ZoneNotFound):
        placement_rules.move_placement_between_zones(workspace, "zx", "z2", "p1", 0, 0)
    with pytest.raises(ZoneNotFound):
        placement_rules.move_placement_between_zones(workspace, "z1", "zx", "p1", 0, 0)


def test_remove_placement_leaves_other_zones_identical():
    workspace = make_workspace(zones={"z1": ["p1", "p2"], "z2": ["p3"]})

    updated = placement_rules.remove_placement(workspace, "z1", "p1")

    assert [p.id for p in _zone(updated, "z1").placements] == ["p2"]
    assert _zone(updated, "z2") == _zone(workspace, "z2")
    with pytest.raises(ZoneNotFound):
        placement_rules.remove_placement(workspace, "zx", "p1")


def test_clone_placement_copies_item_under_new_id():
    workspace = make_workspace(zones={"z1": ["p1"], "z2": []})

    updated = placement_rules.clone_placement(workspace, "z1", "z2", "p1", 4, 4, "p9")

    source = placement_rules.find_placement(_zone(updated, "z1"), "p1")
    assert source == placement_rules.find_placement(_zone(workspace, "z1"), "p1")
    clone = placement_rules.find_placement(_zone(updated, "z2"), "p9")
    assert clone.item == source.item
    assert clone.source_zone_id == "z2"
    assert (clone.position.x, clone.position.y) == (4, 4)


def test_clone_into_same_zone():
    workspace = make_workspace(zones={"z1": ["p1"]})

    updated = placement_rules.clone_placement(workspace, "z1", "z1", "p1", 1, 1, "p2")

    assert [p.id for p in _zone(updated, "z1").placements] == ["p1", "p2"]
    assert placement_rules.check_workspace_consistency(updated) == []


def test_check_workspace_consistency_reports_problems():
    workspace = make_workspace(zones={"z1": ["p1"], "z2": ["p1"]})
    stray = workspace.zones[0].placements[0].model_copy(update={"source_zone_id": "z2"})
    broken = workspace.model_copy(
        update={"zones": (workspace.zones[0].model_copy(update={"placements": (stray,)}), workspace.zones[1])}
    )

    problems = placement_rules.check_workspace_consistency(broken)

    assert any("points at z2" in problem for problem in problems)
    assert any("p1 used 2 times" in problem for problem in problems)


def test_positions_must_be_finite():
    workspace = make_workspace()

    with pytest.raises(ValidationError):
        placement_rules.add_placement(workspace, "z1", make_item(), float("nan"), 0, "p1")
