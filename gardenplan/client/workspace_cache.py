import asyncio
import logging
from typing import Dict, List, Optional

from gardenplan.client.remote import RemoteAccessor
from gardenplan.domain.errors import WorkspaceNotFound
from gardenplan.models.workspace_models import Workspace


class WorkspaceCache:
    """Last known value of every workspace, read through to a RemoteAccessor.

    The cache is owned by whoever builds it and holds entries for its whole
    lifetime; there is no eviction. Concurrent misses on the same id share a
    single fetch.
    """

    def __init__(self, remote: RemoteAccessor):
        self.remote = remote
        self._entries: Dict[str, Workspace] = {}
        self._inflight: Dict[str, asyncio.Task] = {}

    def get(self, workspace_id: str) -> Optional[Workspace]:
        return self._entries.get(workspace_id)

    def put(self, workspace: Workspace) -> None:
        self._entries[workspace.id] = workspace

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, workspace_id: str) -> bool:
        return workspace_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    async def get_or_fetch(self, workspace_id: str) -> Workspace:
        """Return the cached workspace, fetching it on a miss.

        Args:
            workspace_id (str): Workspace to resolve

        Raises:
            WorkspaceNotFound: The remote accessor does not know the id

        Returns:
            Workspace: The value every mutation should start from
        """
        workspace = self._entries.get(workspace_id)
        if workspace is not None:
            return workspace

        task = self._inflight.get(workspace_id)
        if task is None:
            task = asyncio.ensure_future(self._fetch(workspace_id))
            self._inflight[workspace_id] = task
        # shield: one caller being cancelled must not cancel the shared fetch
        await asyncio.shield(task)

        # Re-read: another waiter may already have stored an edit on top of the fetched value.
        workspace = self._entries.get(workspace_id)
        if workspace is None:
            raise WorkspaceNotFound(workspace_id)
        return workspace

    async def _fetch(self, workspace_id: str) -> None:
        try:
            logging.debug(f"Fetching workspace {workspace_id}")
            workspace = await self.remote.find_by_id(workspace_id)
            if workspace is not None and workspace_id not in self._entries:
                self._entries[workspace_id] = workspace
        finally:
            self._inflight.pop(workspace_id, None)

    async def populate_all(self) -> List[Workspace]:
        """Fetch every workspace and store each one, overwriting existing entries."""
        workspaces = await self.remote.find_all()
        for workspace in workspaces:
            self._entries[workspace.id] = workspace
        logging.debug(f"Cached {len(workspaces)} workspaces")
        return workspaces
