"""Shared pytest fixtures for workspace tests.

Workspaces are small and built by hand so each test can state exactly which
zones and placements it starts from.
"""

from __future__ import annotations

import itertools
from typing import Dict, List, Optional

import pytest

from gardenplan.client.workspace_cache import WorkspaceCache
from gardenplan.client.workspace_repository import WorkspaceRepository
from gardenplan.models.workspace_models import (
    Item,
    ItemPlacement,
    Position,
    Presentation,
    Workspace,
    Zone,
)


def make_item(item_id: str = "plant_tomato") -> Item:
    return Item(
        id=item_id,
        category="tomatoes",
        variant="cherry",
        display_name="Tomato",
        size=1,
        presentation=Presentation(icon_path="tomato.png", accent_color={"red": 200}),
        metadata={"plantingDistanceInFeet": 2.0},
    )


def make_placement(placement_id: str, zone_id: str, x: float = 0, y: float = 0, item: Item | None = None):
    return ItemPlacement(
        id=placement_id,
        position=Position(x=x, y=y),
        source_zone_id=zone_id,
        item=item or make_item(),
    )


def make_workspace(workspace_id: str = "grdn_1", zones: Dict[str, List[str]] | None = None) -> Workspace:
    """Build a workspace from ``{zone_id: [placement ids]}`` (defaults to empty z1 and z2)."""
    zones = zones if zones is not None else {"z1": [], "z2": []}
    return Workspace(
        id=workspace_id,
        zones=tuple(
            Zone(
                id=zone_id,
                name=f"Bed {zone_id}",
                width=6,
                height=6,
                placements=tuple(make_placement(pid, zone_id) for pid in placement_ids),
            )
            for zone_id, placement_ids in zones.items()
        ),
    )


class FakeRemote:
    """In-memory RemoteAccessor that records calls."""

    def __init__(self, workspaces: List[Workspace] | None = None):
        self.workspaces = {w.id: w for w in workspaces or []}
        self.find_by_id_calls: List[str] = []
        self.find_all_calls = 0

    async def find_all(self) -> List[Workspace]:
        self.find_all_calls += 1
        return list(self.workspaces.values())

    async def find_by_id(self, workspace_id: str) -> Optional[Workspace]:
        self.find_by_id_calls.append(workspace_id)
        return self.workspaces.get(workspace_id)


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"placement_{next(counter)}"


@pytest.fixture
def repo_env(sequential_ids):
    """Repository over an empty two-zone workspace ``grdn_1``."""
    remote = FakeRemote([make_workspace()])
    cache = WorkspaceCache(remote)
    repo = WorkspaceRepository(cache, id_generator=sequential_ids)
    return repo, cache, remote
