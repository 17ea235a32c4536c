from pydantic import BaseModel, Field

from models.location import Location


# ─── RAUMLISTE ───

class RoomListConfig(BaseModel):
    """Liste von Standorten, für die Kennungen erzeugt werden sollen.

    Die Einträge werden über das Feld "school" (highfield/fearnhill) und
    innerhalb einer Schule über "kind" unterschieden, z.B.:

        - school: highfield
          room: {kind: classroom, block: howard, floor: {level: null}, discriminator: 5}
    """
    # Überschrift für Tabellen und Export
    title: str = Field("Raumliste",
        description="Überschrift für Tabellen und Export")
    # Doppelte Kennungen als Warnung melden (die Modelle selbst prüfen das nicht)
    warn_on_duplicates: bool = Field(True,
        description="Doppelte Kennungen als Warnung melden")
    # Alle Standorte der Liste
    locations: list[Location] = Field(default_factory=list,
        description="Standorte (Highfield oder Fearnhill)")
