from models.ranged import OutOfRangeError, RangedU8, ranged_u8, FloorLevel, Discriminator
from models.highfield import (
    HighfieldBlock,
    HighfieldFloor,
    HighfieldRoom,
    HighfieldHall,
    HighfieldSportsHall,
    HighfieldClassroom,
)
from models.fearnhill import (
    FearnhillSection,
    FearnhillRoom,
    FearnhillSportsHall,
    FearnhillGym,
    FearnhillDanceStudio,
    FearnhillDramaStudio,
    FearnhillClassroom,
)
from models.location import (
    Location,
    HighfieldLocation,
    FearnhillLocation,
    location_adapter,
    render_location,
)

__all__ = [
    "OutOfRangeError",
    "RangedU8",
    "ranged_u8",
    "FloorLevel",
    "Discriminator",
    "HighfieldBlock",
    "HighfieldFloor",
    "HighfieldRoom",
    "HighfieldHall",
    "HighfieldSportsHall",
    "HighfieldClassroom",
    "FearnhillSection",
    "FearnhillRoom",
    "FearnhillSportsHall",
    "FearnhillGym",
    "FearnhillDanceStudio",
    "FearnhillDramaStudio",
    "FearnhillClassroom",
    "Location",
    "HighfieldLocation",
    "FearnhillLocation",
    "location_adapter",
    "render_location",
]
