import logging
from typing import Callable, List

from gardenplan.client.workspace_cache import WorkspaceCache
from gardenplan.domain import placement_rules
from gardenplan.domain.identifiers import generate_placement_id
from gardenplan.models.workspace_models import Item, Workspace


class WorkspaceRepository:
    """Optimistic, local edits of workspace layouts.

    Every edit resolves the workspace through the cache, applies one of the
    placement rules and stores the result back before returning it. Nothing
    awaits between reading the cached value and storing the new one, so edits
    on the same workspace apply in call order.
    """

    def __init__(
        self,
        cache: WorkspaceCache,
        id_generator: Callable[[], str] = generate_placement_id,
    ):
        self.cache = cache
        self.id_generator = id_generator

    async def find_all(self) -> List[Workspace]:
        return await self.cache.populate_all()

    async def find_by_id(self, workspace_id: str) -> Workspace:
        return await self.cache.get_or_fetch(workspace_id)

    def _store(self, workspace: Workspace) -> Workspace:
        self.cache.put(workspace)
        return workspace

    async def add_item_to_workspace(
        self, workspace_id: str, zone_id: str, item: Item, x: float, y: float
    ) -> Workspace:
        """Place a new copy of an item in a zone

        Args:
            workspace_id (str): Workspace to edit
            zone_id (str): Zone receiving the placement
            item (Item): Item carried by the new placement
            x (float): Horizontal position inside the zone
            y (float): Vertical position inside the zone

        Returns:
            Workspace: Updated workspace, also stored in the cache
        """
        logging.debug(
            f"add_item_to_workspace: workspace={workspace_id} zone={zone_id} item={item.id} x={x} y={y}"
        )
        workspace = await self.cache.get_or_fetch(workspace_id)
        updated = placement_rules.add_placement(
            workspace, zone_id, item, x, y, placement_id=self.id_generator()
        )
        logging.info(f"Item {item.id} added to zone {zone_id} of workspace {workspace_id}")
        return self._store(updated)

    async def move_item_within_zone(
        self, workspace_id: str, zone_id: str, placement_id: str, x: float, y: float
    ) -> Workspace:
        """Move a placement to a new position in the same zone.

        An unknown placement id is ignored and the workspace comes back unchanged.
        """
        logging.debug(
            f"move_item_within_zone: workspace={workspace_id} zone={zone_id} placement={placement_id} x={x} y={y}"
        )
        workspace = await self.cache.get_or_fetch(workspace_id)
        updated = placement_rules.move_placement_within_zone(
            workspace, zone_id, placement_id, x, y
        )
        logging.info(f"Placement {placement_id} moved within zone {zone_id}")
        return self._store(updated)

    async def move_item_between_zones(
        self,
        workspace_id: str,
        source_zone_id: str,
        target_zone_id: str,
        placement_id: str,
        x: float,
        y: float,
    ) -> Workspace:
        """Move a placement into another zone, keeping its id

        Args:
            workspace_id (str): Workspace to edit
            source_zone_id (str): Zone currently holding the placement
            target_zone_id (str): Zone receiving the placement
            placement_id (str): Placement to move
            x (float): Horizontal position in the target zone
            y (float): Vertical position in the target zone

        Raises:
            ZoneNotFound: Source or target zone is not in the workspace
            PlacementNotFound: The source zone does not hold the placement

        Returns:
            Workspace: Updated workspace, also stored in the cache
        """
        logging.debug(
            f"move_item_between_zones: workspace={workspace_id} {source_zone_id} -> {target_zone_id} "
            f"placement={placement_id} x={x} y={y}"
        )
        workspace = await self.cache.get_or_fetch(workspace_id)
        updated = placement_rules.move_placement_between_zones(
            workspace, source_zone_id, target_zone_id, placement_id, x, y
        )
        logging.info(
            f"Placement {placement_id} moved from zone {source_zone_id} to zone {target_zone_id}"
        )
        return self._store(updated)

    async def remove_item_from_zone(
        self, workspace_id: str, zone_id: str, placement_id: str
    ) -> Workspace:
        logging.debug(
            f"remove_item_from_zone: workspace={workspace_id} zone={zone_id} placement={placement_id}"
        )
        workspace = await self.cache.get_or_fetch(workspace_id)
        updated = placement_rules.remove_placement(workspace, zone_id, placement_id)
        logging.info(f"Placement {placement_id} removed from zone {zone_id}")
        return self._store(updated)

    async def clone_item(
        self,
        workspace_id: str,
        source_zone_id: str,
        target_zone_id: str,
        source_placement_id: str,
        x: float,
        y: float,
    ) -> Workspace:
        """Duplicate a placement into a zone under a fresh id

        Args:
            workspace_id (str): Workspace to edit
            source_zone_id (str): Zone holding the placement to copy
            target_zone_id (str): Zone receiving the copy, may equal the source zone
            source_placement_id (str): Placement to copy
            x (float): Horizontal position of the copy
            y (float): Vertical position of the copy

        Raises:
            ZoneNotFound: Source or target zone is not in the workspace
            PlacementNotFound: The source zone does not hold the placement

        Returns:
            Workspace: Updated workspace, also stored in the cache
        """
        logging.debug(
            f"clone_item: workspace={workspace_id} {source_zone_id} -> {target_zone_id} "
            f"placement={source_placement_id} x={x} y={y}"
        )
        workspace = await self.cache.get_or_fetch(workspace_id)
        updated = placement_rules.clone_placement(
            workspace,
            source_zone_id,
            target_zone_id,
            source_placement_id,
            x,
            y,
            placement_id=self.id_generator(),
        )
        logging.info(f"Placement {source_placement_id} cloned into zone {target_zone_id}")
        return self._store(updated)
