"""Standort eines Raums an einer der beiden Schulen (Pydantic v2).

Highfield gilt als Standard-Schule und bekommt kein Präfix. Fearnhill-Räume
werden mit "FH " eingeleitet, da beide Schulen z.B. eine "Sports Hall" haben.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from models.fearnhill import FearnhillRoom
from models.highfield import HighfieldRoom

FEARNHILL_PREFIX = "FH "


class HighfieldLocation(BaseModel):
    """Raum an der Highfield-Schule."""

    model_config = ConfigDict(frozen=True)

    school: Literal["highfield"] = "highfield"
    room: HighfieldRoom

    def render(self) -> str:
        return self.room.render()

    def __str__(self) -> str:
        return self.render()


class FearnhillLocation(BaseModel):
    """Raum an der Fearnhill-Schule."""

    model_config = ConfigDict(frozen=True)

    school: Literal["fearnhill"] = "fearnhill"
    room: FearnhillRoom

    def render(self) -> str:
        return FEARNHILL_PREFIX + self.room.render()

    def __str__(self) -> str:
        return self.render()


Location = Annotated[
    Union[HighfieldLocation, FearnhillLocation],
    Field(discriminator="school"),
]

# Validierung/Serialisierung einzelner Standorte außerhalb eines Modells
location_adapter = TypeAdapter(Location)


def render_location(location: Union[HighfieldLocation, FearnhillLocation]) -> str:
    """Kennung eines Standorts, z.B. "HG05" oder "FH Mu4"."""
    return location.render()
