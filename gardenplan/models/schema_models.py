from pydantic import BaseModel, Field
from typing import Any, List, Literal, Optional, Tuple
from datetime import date, datetime

TemperatureUnit = Literal["C", "F"]


class TemperatureSchema(BaseModel):
    value: float
    unit: TemperatureUnit

    class Config:
        from_attributes = True


class MonthlyTemperatureRangeSchema(BaseModel):
    id: str
    month: int = Field(ge=1, le=12)
    min: TemperatureSchema
    max: TemperatureSchema

    class Config:
        from_attributes = True


class LocationSchema(BaseModel):
    id: str
    name: str
    region: str
    country: str
    monthly_temperatures: List[MonthlyTemperatureRangeSchema] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PlantSchema(BaseModel):
    id: str
    bed_id: Optional[str] = None
    name: str
    family: str
    variant: str
    position_x: Optional[float] = None
    position_y: Optional[float] = None
    icon_path: Optional[str] = None
    accent_color: Any = None
    planting_distance_value: Optional[float] = None
    planting_distance_unit: Optional[str] = None

    class Config:
        from_attributes = True


class BedSchema(BaseModel):
    id: str
    garden_id: Optional[str] = None
    name: str = ""
    description: str = ""
    width: float
    height: float
    plants: List[PlantSchema] = []

    class Config:
        from_attributes = True


class GardenSchema(BaseModel):
    id: str
    name: str
    description: str
    beds: List[BedSchema] = []

    class Config:
        from_attributes = True


class TemperatureRangeFileData(BaseModel):
    min: Tuple[float, TemperatureUnit]
    max: Tuple[float, TemperatureUnit]


class MonthlyTemperatureFileData(BaseModel):
    month: int = Field(ge=1, le=12)
    temperatureRange: TemperatureRangeFileData


class LocationEntryFileData(BaseModel):
    name: str
    region: str
    country: str
    monthlyTemperatures: List[MonthlyTemperatureFileData]


class LocationFileData(BaseModel):
    """Layout of the temperature data file.

    locations:
      - name: ...
        monthlyTemperatures:
          - month: 1
            temperatureRange:
              min: [5.2, "C"]
              max: [8.3, "C"]
    """

    locations: List[LocationEntryFileData]


class EstimatedDateSchema(BaseModel):
    location_id: str
    temperature: TemperatureSchema
    estimated_date: date
