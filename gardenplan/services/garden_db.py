"""DB service layer for garden use cases.

- Routers should not touch DB sessions directly; they call this module.
- This layer owns session/transaction boundaries.
"""

from typing import List

from gardenplan.crud import CreateData, ReadData
from gardenplan.db import Session
from gardenplan.domain.errors import InvalidArgsError
from gardenplan.domain.identifiers import is_id_with_prefix
from gardenplan.models.schema_models import GardenSchema

GARDEN_ID_PREFIX = "grdn"


async def read_all_gardens() -> List[GardenSchema]:
    async with Session() as session:
        gardens = await ReadData.read_all_gardens(session)
        if gardens is None:
            raise RuntimeError("Failed to read gardens")
        return gardens


async def read_garden(garden_id: str) -> GardenSchema | None:
    if not is_id_with_prefix(GARDEN_ID_PREFIX, garden_id):
        raise InvalidArgsError("Invalid garden id")
    async with Session() as session:
        return await ReadData.read_garden(garden_id, session)


async def create_garden_data(garden: GardenSchema) -> None:
    async with Session() as session:
        success = await CreateData.create_garden_data(garden, session)
        if not success:
            raise RuntimeError("Failed to create garden data")
