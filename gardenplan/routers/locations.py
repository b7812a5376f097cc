from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from gardenplan.models.schema_models import (
    EstimatedDateSchema,
    LocationSchema,
    TemperatureSchema,
    TemperatureUnit,
)
from gardenplan.services import location_db

location_router = APIRouter()


class LocationAPI:
    @staticmethod
    @location_router.get("/locations", response_model=List[LocationSchema])
    async def list_locations():
        return await location_db.read_all_locations()

    @staticmethod
    @location_router.get("/locations/{location_id}", response_model=LocationSchema)
    async def get_location(location_id: str):
        location = await location_db.read_location(location_id)
        if location is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Location with id {location_id} not found",
            )
        return location

    @staticmethod
    @location_router.get("/locations/{location_id}/date", response_model=EstimatedDateSchema)
    async def estimate_date(
        location_id: str,
        value: float = Query(...),
        unit: TemperatureUnit = Query("C"),
    ):
        temperature = TemperatureSchema(value=value, unit=unit)
        try:
            estimated = await location_db.calculate_date(location_id, temperature)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

        if estimated is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Location with id {location_id} not found",
            )
        return EstimatedDateSchema(
            location_id=location_id, temperature=temperature, estimated_date=estimated
        )
