"""DB service layer for locations and their monthly temperatures."""

import logging
import pathlib
from datetime import date
from typing import List

import yaml
from pydantic import ValidationError

from gardenplan.crud import CreateData, ReadData
from gardenplan.db import Session
from gardenplan.domain.temperature_rules import estimate_date
from gardenplan.models.schema_models import (
    LocationFileData,
    LocationSchema,
    TemperatureSchema,
)


def parse_temperature_file(text: str) -> LocationFileData:
    """Parse and validate the YAML temperature data

    Raises:
        ValueError: The content is not valid YAML or does not match LocationFileData
    """
    try:
        return LocationFileData.model_validate(yaml.safe_load(text) or {})
    except (yaml.YAMLError, ValidationError) as e:
        logging.error(f"Failed to validate temperature data: {e}")
        raise ValueError("Invalid temperature data format") from e


async def load_temperature_data(file_path: str) -> List[str] | None:
    """Store every location of the temperature file

    Args:
        file_path (str): Path of the YAML temperature file

    Returns:
        List[str]: Ids of the created locations, None if the file does not exist
    """
    path = pathlib.Path(file_path)
    if not path.exists():
        logging.error(f"Temperature data file not found at {path}")
        return None

    file_data = parse_temperature_file(path.read_text(encoding="utf-8"))
    location_ids = []
    async with Session() as session:
        for location in file_data.locations:
            location_id = await CreateData.create_location_data(location, session)
            if location_id is None:
                raise RuntimeError(f"Failed to create location {location.name}")
            location_ids.append(location_id)
    logging.info(f"{len(location_ids)} locations loaded from {path}")
    return location_ids


async def read_all_locations() -> List[LocationSchema]:
    async with Session() as session:
        locations = await ReadData.read_all_locations(session)
        if locations is None:
            raise RuntimeError("Failed to read locations")
        return locations


async def read_location(location_id: str) -> LocationSchema | None:
    async with Session() as session:
        return await ReadData.read_location(location_id, session)


async def calculate_date(
    location_id: str, temperature: TemperatureSchema, today: date | None = None
) -> date | None:
    """Estimate the first date a location's monthly average reaches ``temperature``.

    Returns None when the location does not exist.
    """
    location = await read_location(location_id)
    if location is None:
        return None
    return estimate_date(location.monthly_temperatures, temperature, today or date.today())
