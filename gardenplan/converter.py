from gardenplan.models.schema_models import BedSchema, GardenSchema, PlantSchema
from gardenplan.models.workspace_models import (
    Item,
    ItemPlacement,
    Position,
    Presentation,
    Workspace,
    Zone,
)

FEET_PER_UNIT = {
    "feet": 1.0,
    "inches": 1 / 12,
    "yards": 3.0,
    "meters": 3.28084,
    "centimeters": 0.0328084,
}

DEFAULT_WATER_LEVEL = 5
DEFAULT_SUN_LEVEL = 5


def convert_distance_to_feet(value: float, unit: str) -> float:
    """Convert a planting distance to feet

    Raises:
        ValueError: Unknown distance unit
    """
    try:
        return value * FEET_PER_UNIT[unit]
    except KeyError:
        raise ValueError(f"Unknown distance unit: {unit}") from None


class DataConverter:
    """This class is used to convert stored gardens into workspaces sent to clients."""

    def convert_garden_to_workspace(self, garden: GardenSchema) -> Workspace:
        """Convert a garden with its beds and plants to the Workspace layout

        Args:
            garden (GardenSchema): Garden read from the database

        Returns:
            Workspace: One zone per bed, one placement per placeable plant
        """
        return Workspace(
            id=garden.id,
            indicators=(),
            zones=tuple(self.convert_bed_to_zone(bed) for bed in garden.beds),
            metadata={},
        )

    def convert_bed_to_zone(self, bed: BedSchema) -> Zone:
        placements = tuple(
            self.convert_plant_to_placement(plant, bed.id)
            for plant in bed.plants
            if self._is_placeable(plant)
        )
        return Zone(
            id=bed.id,
            name=bed.name,
            description=bed.description,
            width=bed.width,
            height=bed.height,
            water_level=DEFAULT_WATER_LEVEL,
            sun_level=DEFAULT_SUN_LEVEL,
            placements=placements,
            metadata={},
        )

    @staticmethod
    def _is_placeable(plant: PlantSchema) -> bool:
        # Plants without a position, icon or planting distance are not drawn.
        return (
            plant.position_x is not None
            and plant.position_y is not None
            and plant.icon_path is not None
            and plant.planting_distance_value is not None
            and plant.planting_distance_unit is not None
        )

    def convert_plant_to_placement(self, plant: PlantSchema, zone_id: str) -> ItemPlacement:
        planting_distance = {
            "value": plant.planting_distance_value,
            "unit": plant.planting_distance_unit,
        }
        item = Item(
            id=plant.id,
            category=plant.family,
            variant=plant.variant,
            display_name=plant.name,
            size=1,
            presentation=Presentation(
                icon_path=plant.icon_path,
                accent_color=plant.accent_color,
            ),
            metadata={
                "plantingDistance": planting_distance,
                "plantingDistanceInFeet": convert_distance_to_feet(
                    plant.planting_distance_value, plant.planting_distance_unit
                ),
            },
        )
        return ItemPlacement(
            id=plant.id,
            position=Position(x=plant.position_x, y=plant.position_y),
            source_zone_id=zone_id,
            item=item,
        )
