from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from typing import List
import logging

from gardenplan.models.schema_models import (
    BedSchema,
    GardenSchema,
    LocationEntryFileData,
    LocationSchema,
    PlantSchema,
)
from gardenplan.models.schemas import (
    Bed,
    Garden,
    Location,
    MonthlyTemperatureRange,
    Plant,
)


class ReadData:
    @staticmethod
    async def read_all_gardens(session: AsyncSession) -> List[GardenSchema]:
        """Read every garden with its beds and their plants

        Returns:
            List[GardenSchema]: All gardens, None if the query failed
        """
        async with session:
            try:
                stmt = select(Garden).options(
                    selectinload(Garden.beds).selectinload(Bed.plants)
                )
                result = await session.execute(stmt)
                return [GardenSchema.model_validate(g) for g in result.scalars().all()]
            except SQLAlchemyError as e:
                logging.error(f"Failed to read gardens: {e}")

    @staticmethod
    async def read_garden(garden_id: str, session: AsyncSession) -> GardenSchema:
        """Read one garden with its beds and their plants

        Args:
            garden_id (str): To identify the garden

        Returns:
            GardenSchema: Garden data, None if not found
        """
        async with session:
            try:
                stmt = (
                    select(Garden)
                    .where(Garden.id == garden_id)
                    .options(selectinload(Garden.beds).selectinload(Bed.plants))
                )
                result = await session.execute(stmt)
                result = result.scalars().first()

                if result is None:
                    return None

                return GardenSchema.model_validate(result)
            except SQLAlchemyError as e:
                logging.error(f"Failed to read garden data: {e}")

    @staticmethod
    async def read_all_locations(session: AsyncSession) -> List[LocationSchema]:
        async with session:
            try:
                stmt = select(Location).options(selectinload(Location.monthly_temperatures))
                result = await session.execute(stmt)
                return [LocationSchema.model_validate(l) for l in result.scalars().all()]
            except SQLAlchemyError as e:
                logging.error(f"Failed to read locations: {e}")

    @staticmethod
    async def read_location(location_id: str, session: AsyncSession) -> LocationSchema:
        """Read a location with its monthly temperature ranges

        Args:
            location_id (str): To identify the location

        Returns:
            LocationSchema: Location data, None if not found
        """
        async with session:
            try:
                stmt = (
                    select(Location)
                    .where(Location.id == location_id)
                    .options(selectinload(Location.monthly_temperatures))
                )
                result = await session.execute(stmt)
                result = result.scalars().first()

                if result is None:
                    return None

                return LocationSchema.model_validate(result)
            except SQLAlchemyError as e:
                logging.error(f"Failed to read location data: {e}")


class CreateData:
    @staticmethod
    async def create_garden_data(garden: GardenSchema, session: AsyncSession) -> bool:
        """Create a garden together with its beds and plants

        Args:
            garden (GardenSchema): Garden data with nested beds and plants
            session (AsyncSession): AsyncSession object to interact with database
        """
        async with session:
            try:
                new_garden = Garden(
                    id=garden.id,
                    name=garden.name,
                    description=garden.description,
                )
                for bed in garden.beds:
                    new_bed = CreateData._new_bed(bed)
                    new_garden.beds.append(new_bed)
                session.add(new_garden)
                await session.commit()
                return True
            except SQLAlchemyError as e:
                await session.rollback()
                logging.error(f"Failed to create garden data: {e}")
                return False

    @staticmethod
    def _new_bed(bed: BedSchema) -> Bed:
        new_bed = Bed(
            id=bed.id,
            name=bed.name,
            description=bed.description,
            width=bed.width,
            height=bed.height,
        )
        for plant in bed.plants:
            new_bed.plants.append(CreateData._new_plant(plant))
        return new_bed

    @staticmethod
    def _new_plant(plant: PlantSchema) -> Plant:
        return Plant(
            id=plant.id,
            name=plant.name,
            family=plant.family,
            variant=plant.variant,
            position_x=plant.position_x,
            position_y=plant.position_y,
            icon_path=plant.icon_path,
            accent_color=plant.accent_color,
            planting_distance_value=plant.planting_distance_value,
            planting_distance_unit=plant.planting_distance_unit,
        )

    @staticmethod
    async def create_location_data(location: LocationEntryFileData, session: AsyncSession) -> str:
        """Create a location and its monthly temperature ranges

        Args:
            location (LocationEntryFileData): One location entry of the temperature file

        Returns:
            str: Id of the new location, None if it could not be saved
        """
        async with session:
            try:
                new_location = Location(
                    name=location.name,
                    region=location.region,
                    country=location.country,
                )
                for month_data in location.monthlyTemperatures:
                    min_value, min_unit = month_data.temperatureRange.min
                    max_value, max_unit = month_data.temperatureRange.max
                    new_location.monthly_temperatures.append(
                        MonthlyTemperatureRange(
                            month=month_data.month,
                            min={"value": min_value, "unit": min_unit},
                            max={"value": max_value, "unit": max_unit},
                        )
                    )
                session.add(new_location)
                await session.commit()
                return new_location.id
            except SQLAlchemyError as e:
                await session.rollback()
                logging.error(f"Failed to create location data: {e}")
