"""Example data written into a fresh database."""

import logging

from gardenplan.create_sqlite_engine import engine
from gardenplan.domain.identifiers import generate_prefixed_id
from gardenplan.models.schema_models import BedSchema, GardenSchema, PlantSchema
from gardenplan.models.schemas import Base
from gardenplan.services.garden_db import create_garden_data
from gardenplan.services.location_db import load_temperature_data

# name, family, variant, icon, planting distance (inches)
EXAMPLE_PLANTS = [
    ("Tomato", "tomatoes", "cherry", "tomato.png", 24),
    ("Basil", "herbs", "genovese", "basil.png", 12),
    ("Carrot", "root-vegetables", "nantes", "carrot.png", 3),
    ("Lettuce", "leafy-greens", "butterhead", "lettuce.png", 10),
    ("Marigold", "flowers", "french", "marigold.png", 8),
]


async def reset_schema(drop_existing: bool) -> None:
    async with engine.begin() as conn:
        if drop_existing:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


def build_example_garden() -> GardenSchema:
    plants = [
        PlantSchema(
            id=generate_prefixed_id("plant"),
            name=name,
            family=family,
            variant=variant,
            position_x=0.0,
            position_y=0.0,
            icon_path=icon_path,
            accent_color={"red": 120, "green": 180, "blue": 90, "alpha": 1},
            planting_distance_value=distance,
            planting_distance_unit="inches",
        )
        for name, family, variant, icon_path, distance in EXAMPLE_PLANTS
    ]
    bed = BedSchema(
        id=generate_prefixed_id("bed"),
        name="Bed 1",
        description="Raised bed",
        width=6,
        height=6,
        plants=plants,
    )
    return GardenSchema(
        id=generate_prefixed_id("grdn"),
        name="My Garden",
        description="My garden",
        beds=[bed],
    )


async def initialize_new_db_with_data(temperature_data_file_path: str) -> None:
    """Recreate the schema, then store the example garden and the temperature data."""
    await reset_schema(drop_existing=True)
    garden = build_example_garden()
    await create_garden_data(garden)
    logging.info(f"Garden saved: {garden.name} ({garden.id}) with {len(EXAMPLE_PLANTS)} plants")
    await load_temperature_data(temperature_data_file_path)
