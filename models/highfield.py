"""Raummodell der Highfield-Schule (Pydantic v2).

Kennungen von Klassenräumen setzen sich ohne Trennzeichen zusammen:
Block-Buchstabe + Etage + zweistellige Raumnummer, z.B. "HG05" oder "P327".
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.ranged import Discriminator, FloorLevel


class HighfieldBlock(str, Enum):
    """Gebäudeblock der Highfield-Schule."""

    HOWARD = "howard"
    PARKER = "parker"
    UNWIN = "unwin"

    def render(self) -> str:
        """Kennbuchstabe des Blocks."""
        return _BLOCK_CODES[self]

    def __str__(self) -> str:
        return self.render()


_BLOCK_CODES: dict[HighfieldBlock, str] = {
    HighfieldBlock.HOWARD: "H",
    HighfieldBlock.PARKER: "P",
    HighfieldBlock.UNWIN: "U",
}


class HighfieldFloor(BaseModel):
    """Etage eines Blocks: Erdgeschoss (level=None) oder Etage 1–9.

    Eine Etage 0 gibt es nicht, dafür steht das Erdgeschoss.
    """

    model_config = ConfigDict(frozen=True)

    level: Optional[FloorLevel] = None

    @classmethod
    def ground(cls) -> "HighfieldFloor":
        return cls()

    @classmethod
    def upper(cls, level: int) -> "HighfieldFloor":
        return cls(level=FloorLevel(level))

    @property
    def is_ground(self) -> bool:
        return self.level is None

    def render(self) -> str:
        """'G' für das Erdgeschoss, sonst die Etagennummer."""
        if self.level is None:
            return "G"
        return str(self.level.get())

    def __str__(self) -> str:
        return self.render()


# ─── RÄUME ───
# Die Raumliste ist offen: weitere Räume werden als eigene Klasse mit
# eindeutigem `kind` ergänzt und in HighfieldRoom aufgenommen.

class _HighfieldRoomBase(BaseModel):
    """Basis aller Highfield-Räume; jede Raumklasse muss render() überschreiben."""

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class HighfieldHall(_HighfieldRoomBase):
    """Die Aula (z.B. für Versammlungen)."""

    kind: Literal["hall"] = "hall"

    def render(self) -> str:
        return "Hall"


class HighfieldSportsHall(_HighfieldRoomBase):
    """Die Sporthalle."""

    kind: Literal["sports_hall"] = "sports_hall"

    def render(self) -> str:
        return "Sports Hall"


class HighfieldClassroom(_HighfieldRoomBase):
    """Klassenraum, eindeutig bestimmt durch (Block, Etage, Raumnummer).

    Die Eindeutigkeit über mehrere Räume hinweg wird hier NICHT geprüft.
    """

    kind: Literal["classroom"] = "classroom"
    block: HighfieldBlock
    floor: HighfieldFloor
    discriminator: Discriminator  # unterscheidet Räume derselben Etage

    def render(self) -> str:
        # 1 → "01", 27 → "27"; mehr als zwei Stellen schließt Discriminator aus
        return f"{self.block.render()}{self.floor.render()}{self.discriminator.get():02d}"


HighfieldRoom = Annotated[
    Union[HighfieldHall, HighfieldSportsHall, HighfieldClassroom],
    Field(discriminator="kind"),
]
