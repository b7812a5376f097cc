# HTTP access to the workspaces served by the garden API

import logging
from typing import List, Optional, Protocol

import httpx

from gardenplan.load_settings import api_base_url
from gardenplan.models.workspace_models import Workspace

logger = logging.getLogger(__name__)


class RemoteAccessor(Protocol):
    """Where the workspace cache reads workspaces it does not hold yet."""

    async def find_all(self) -> List[Workspace]:
        ...

    async def find_by_id(self, workspace_id: str) -> Optional[Workspace]:
        ...


class WorkspaceAPIClient:
    """Read-only client for the ``/workspaces`` endpoints.

    Payloads are validated into Workspace values before they are returned,
    so everything handed to the cache already has the expected shape.
    """

    def __init__(
        self,
        base_url: str = api_base_url,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None

    @property
    def http(self) -> httpx.AsyncClient:
        """Lazy-init a reusable async HTTP client."""
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Accept": "application/json"},
            )
        return self._http

    async def close(self) -> None:
        """Shut down the HTTP client."""
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    def _endpoint(self) -> str:
        return "/workspaces"

    async def find_all(self) -> List[Workspace]:
        try:
            response = await self.http.get(self._endpoint())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch workspaces: {e}")
            raise
        return [Workspace.model_validate(item) for item in response.json()]

    async def find_by_id(self, workspace_id: str) -> Optional[Workspace]:
        try:
            response = await self.http.get(f"{self._endpoint()}/{workspace_id}")
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch workspace {workspace_id}: {e}")
            raise
        return Workspace.model_validate(response.json())
