class WorkspaceError(LookupError):
    """Base class for lookups that fail inside a workspace."""


class WorkspaceNotFound(WorkspaceError):
    def __init__(self, workspace_id: str):
        self.workspace_id = workspace_id
        super().__init__(f"Workspace {workspace_id} not found")


class ZoneNotFound(WorkspaceError):
    def __init__(self, zone_id: str, workspace_id: str):
        self.zone_id = zone_id
        self.workspace_id = workspace_id
        super().__init__(f"Zone {zone_id} not found in workspace {workspace_id}")


class PlacementNotFound(WorkspaceError):
    def __init__(self, placement_id: str, zone_id: str):
        self.placement_id = placement_id
        self.zone_id = zone_id
        super().__init__(f"Placement {placement_id} not found in zone {zone_id}")


class InvalidArgsError(ValueError):
    """Raised when a request argument is malformed (e.g. wrong id prefix)."""
