"""Beschränkter Ganzzahl-Typ (u8 mit festen Grenzen) für Etagen und Raumnummern."""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema


class OutOfRangeError(ValueError):
    """Wert liegt außerhalb der inklusiven Grenzen [minimum, maximum]."""

    def __init__(self, value: int, minimum: int, maximum: int):
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Wert {value} liegt außerhalb von [{minimum}, {maximum}]")


@dataclass(frozen=True, order=True)
class RangedU8:
    """Ganzzahl mit fest vorgegebenen, inklusiven Grenzen.

    Nicht direkt verwenden, sondern über ranged_u8(MIN, MAX) eine
    Instanziierung erzeugen. Nach der Konstruktion unveränderlich
    (frozen=True), daher auch als Dict-Key / Set-Element nutzbar.
    """

    value: int

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 255

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} erwartet int, nicht {type(self.value).__name__}"
            )
        if not self.MIN <= self.value <= self.MAX:
            raise OutOfRangeError(self.value, self.MIN, self.MAX)

    def get(self) -> int:
        """Gibt den gespeicherten Wert unverändert zurück."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    # ─── Pydantic-Integration ───

    @classmethod
    def _coerce(cls, value: Any) -> "RangedU8":
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise PydanticCustomError("int_type", "Ganzzahl erwartet")
        try:
            return cls(value)
        except OutOfRangeError as e:
            raise PydanticCustomError(
                "out_of_range",
                "Wert {value} liegt außerhalb von [{minimum}, {maximum}]",
                {"value": e.value, "minimum": e.minimum, "maximum": e.maximum},
            ) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # Als Modellfeld: int oder fertige Instanz annehmen, als int serialisieren
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.value, return_schema=core_schema.int_schema()
            ),
        )


@lru_cache(maxsize=None)
def ranged_u8(minimum: int, maximum: int) -> type[RangedU8]:
    """Erzeugt (einmalig pro Grenzpaar) die Instanziierung RangedU8<minimum, maximum>."""
    if not 0 <= minimum <= maximum <= 255:
        raise ValueError(
            f"Ungültige Grenzen für RangedU8: [{minimum}, {maximum}] "
            f"(erlaubt: 0 <= MIN <= MAX <= 255)"
        )
    name = f"RangedU8_{minimum}_{maximum}"
    cls = type(name, (RangedU8,), {"MIN": minimum, "MAX": maximum, "__module__": __name__})
    # Unter dem eigenen Namen im Modul ablegen, damit pickle die Klasse findet
    globals()[name] = cls
    return cls


# Etage oberhalb des Erdgeschosses (Highfield hat nie mehr als 9 Etagen)
FloorLevel = ranged_u8(1, 9)
# Laufende Raumnummer innerhalb eines Blocks/Bereichs
Discriminator = ranged_u8(1, 99)
