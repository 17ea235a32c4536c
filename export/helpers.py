"""Gemeinsame Hilfsfunktionen für Tabellen- und Excel-Ausgabe der Raumkennungen."""

import logging
from collections import Counter
from datetime import date
from typing import Iterable, Union

from models.fearnhill import FearnhillSection
from models.highfield import HighfieldBlock
from models.location import FearnhillLocation, HighfieldLocation

logger = logging.getLogger(__name__)

AnyLocation = Union[HighfieldLocation, FearnhillLocation]

# ─── Farbpalette (RRGGBB, ohne #) ─────────────────────────────────────────────

COLORS: dict[str, str] = {
    "highfield": "B3D4FF",
    "fearnhill": "B3FFB3",
    "duplicate": "FF9999",
    "header":    "4472C4",
}

SCHOOL_NAMES: dict[str, str] = {
    "highfield": "Highfield",
    "fearnhill": "Fearnhill",
}


def today_str() -> str:
    """Gibt das heutige Datum als DD.MM.YYYY zurück."""
    return date.today().strftime("%d.%m.%Y")


# ─── Kennungs-Tabellen ────────────────────────────────────────────────────────

def school_name(location: AnyLocation) -> str:
    """Anzeigename der Schule; unbekannte Schulen werden unverändert ausgegeben."""
    return SCHOOL_NAMES.get(location.school, location.school)


def room_kind(location: AnyLocation) -> str:
    """Raumart als lesbarer Text, z.B. "sports_hall" → "Sports Hall".

    Neue Raumarten brauchen hier keinen Eintrag, es wird nur der kind-Tag
    umgeformt.
    """
    kind = getattr(location.room, "kind", "")
    return kind.replace("_", " ").title()


def label_rows(locations: Iterable[AnyLocation]) -> list[tuple[str, str, str]]:
    """Gibt (Schule, Raumart, Kennung) pro Standort in Eingabereihenfolge zurück."""
    return [(school_name(loc), room_kind(loc), loc.render()) for loc in locations]


def find_duplicate_labels(locations: Iterable[AnyLocation]) -> dict[str, int]:
    """Kennungen, die mehrfach vorkommen → Anzahl.

    Reine Meldung für den Aufrufer; die Modelle erzwingen keine Eindeutigkeit.
    """
    counts = Counter(loc.render() for loc in locations)
    duplicates = {label: n for label, n in counts.items() if n > 1}
    for label, n in duplicates.items():
        logger.warning(f"Kennung '{label}' kommt {n}x vor")
    return duplicates


def block_codes() -> list[tuple[str, str]]:
    """(Block, Kennbuchstabe) in Definitionsreihenfolge."""
    return [(b.name.title(), b.render()) for b in HighfieldBlock]


def section_codes() -> list[tuple[str, str]]:
    """(Fachbereich, Kürzel) in Definitionsreihenfolge."""
    names = {FearnhillSection.PSHE: "PSHE", FearnhillSection.IT: "IT"}
    return [(names.get(s, s.name.title()), s.render()) for s in FearnhillSection]
