import logging
from typing import List

from fastapi import APIRouter, HTTPException, status

from gardenplan.converter import DataConverter
from gardenplan.domain.errors import InvalidArgsError
from gardenplan.models.workspace_models import Workspace
from gardenplan.services import garden_db

garden_router = APIRouter()
converter = DataConverter()


class WorkspaceAPI:
    @staticmethod
    @garden_router.get("/workspaces", response_model=List[Workspace])
    async def list_workspaces():
        gardens = await garden_db.read_all_gardens()
        logging.info(f"Listing {len(gardens)} workspaces")
        return [converter.convert_garden_to_workspace(garden) for garden in gardens]

    @staticmethod
    @garden_router.get("/workspaces/{workspace_id}", response_model=Workspace)
    async def get_workspace(workspace_id: str):
        try:
            garden = await garden_db.read_garden(workspace_id)
        except InvalidArgsError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        if garden is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Workspace {workspace_id} not found",
            )
        return converter.convert_garden_to_workspace(garden)
