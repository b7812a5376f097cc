from pydantic import BaseModel, FiniteFloat, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Tuple


class WorkspaceValue(BaseModel):
    """Immutable value shared by the workspace shapes.

    Fields are snake_case in Python and camelCase on the wire.
    Use model_copy(update=...) to derive a modified value.
    """

    class Config:
        frozen = True
        alias_generator = to_camel
        populate_by_name = True


class Position(WorkspaceValue):
    x: FiniteFloat
    y: FiniteFloat


class Presentation(WorkspaceValue):
    icon_path: str
    accent_color: Any = None


class Item(WorkspaceValue):
    id: str
    category: str
    variant: str
    display_name: str
    size: float = 1
    presentation: Presentation
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ItemPlacement(WorkspaceValue):
    id: str
    position: Position
    source_zone_id: str
    item: Item


class Zone(WorkspaceValue):
    id: str
    name: str
    description: str = ""
    width: float = 0
    height: float = 0
    water_level: int = 5
    sun_level: int = 5
    placements: Tuple[ItemPlacement, ...] = ()
    metadata: Dict[str, Any] = Field(default_factory=dict)


class Workspace(WorkspaceValue):
    id: str
    indicators: Tuple[Any, ...] = ()
    zones: Tuple[Zone, ...] = ()
    metadata: Dict[str, Any] = Field(default_factory=dict)
