"""Raummodell der Fearnhill-Schule (Pydantic v2)."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from models.ranged import Discriminator


class FearnhillSection(str, Enum):
    """Fachbereich der Fearnhill-Schule."""

    SCIENCE = "science"
    BUSINESS = "business"
    PSHE = "pshe"
    LANGUAGES = "languages"
    TECHNOLOGY = "technology"
    MATHEMATICS = "mathematics"
    ENGLISH = "english"
    MUSIC = "music"
    HUMANITIES = "humanities"
    IT = "it"

    def render(self) -> str:
        """Kürzel des Bereichs (1–2 Buchstaben)."""
        return _SECTION_CODES[self]

    def __str__(self) -> str:
        return self.render()


# Music bekommt "Mu", damit es nicht mit Mathematics ("M") kollidiert
_SECTION_CODES: dict[FearnhillSection, str] = {
    FearnhillSection.SCIENCE: "S",
    FearnhillSection.BUSINESS: "B",
    FearnhillSection.PSHE: "P",
    FearnhillSection.LANGUAGES: "L",
    FearnhillSection.TECHNOLOGY: "T",
    FearnhillSection.MATHEMATICS: "M",
    FearnhillSection.ENGLISH: "E",
    FearnhillSection.MUSIC: "Mu",
    FearnhillSection.HUMANITIES: "H",
    FearnhillSection.IT: "I",
}


# ─── RÄUME ───
# Wie bei Highfield ist die Raumliste offen (neue Klasse + neuer `kind`).

class _FearnhillRoomBase(BaseModel):
    """Basis aller Fearnhill-Räume; jede Raumklasse muss render() überschreiben."""

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class FearnhillSportsHall(_FearnhillRoomBase):
    kind: Literal["sports_hall"] = "sports_hall"

    def render(self) -> str:
        return "Sports Hall"


class FearnhillGym(_FearnhillRoomBase):
    kind: Literal["gym"] = "gym"

    def render(self) -> str:
        return "Gym"


class FearnhillDanceStudio(_FearnhillRoomBase):
    kind: Literal["dance_studio"] = "dance_studio"

    def render(self) -> str:
        return "Dance Studio"


class FearnhillDramaStudio(_FearnhillRoomBase):
    kind: Literal["drama_studio"] = "drama_studio"

    def render(self) -> str:
        return "Drama Studio"


class FearnhillClassroom(_FearnhillRoomBase):
    """Klassenraum in einem Fachbereich, z.B. "Mu4" oder "S12"."""

    kind: Literal["classroom"] = "classroom"
    section: FearnhillSection
    discriminator: Discriminator

    def render(self) -> str:
        # Anders als bei Highfield OHNE führende Null
        return f"{self.section.render()}{self.discriminator.get()}"


FearnhillRoom = Annotated[
    Union[
        FearnhillSportsHall,
        FearnhillGym,
        FearnhillDanceStudio,
        FearnhillDramaStudio,
        FearnhillClassroom,
    ],
    Field(discriminator="kind"),
]
