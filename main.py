"""Raumkennungen Highfield/Fearnhill — Haupt-CLI.

Verwendung:
  python main.py render --school highfield --room classroom --block howard --floor G --number 5
                                          Einzelne Kennung ausgeben (→ HG05)
  python main.py codes                    Block- und Bereichskürzel anzeigen
  python main.py labels <rooms.yaml>      Raumliste als Tabelle anzeigen
  python main.py labels <rooms.yaml> --xlsx out.xlsx
                                          ... und als Excel exportieren
  python main.py template [rooms.yaml]    Beispiel-Raumliste erzeugen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich import box

from models.fearnhill import FearnhillSection
from models.highfield import HighfieldBlock
from models.location import location_adapter

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_ROOMS_YAML = Path("config/rooms.yaml")

ROOM_KINDS = ["hall", "sports_hall", "gym", "dance_studio", "drama_studio", "classroom"]
FLOOR_CHOICES = ["G"] + [str(n) for n in range(1, 10)]


def _abort(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


# ─── RENDER ───────────────────────────────────────────────────────────────────

def _build_location(school: str, room: str, block: Optional[str],
                    floor: Optional[str], section: Optional[str],
                    number: Optional[int]):
    """Baut aus den CLI-Optionen einen Standort (wirft ValidationError/ValueError)."""
    room_data: dict = {"kind": room}
    if room == "classroom":
        if number is None:
            raise ValueError("Für Klassenräume wird --number benötigt.")
        room_data["discriminator"] = number
        if school == "highfield":
            if block is None or floor is None or section is not None:
                raise ValueError("Highfield-Klassenräume benötigen --block und --floor (kein --section).")
            room_data["block"] = block
            room_data["floor"] = {"level": None if floor == "G" else int(floor)}
        else:
            if section is None or block is not None or floor is not None:
                raise ValueError("Fearnhill-Klassenräume benötigen --section (kein --block/--floor).")
            room_data["section"] = section
    elif any(v is not None for v in (block, floor, section, number)):
        raise ValueError(
            f"Raumart '{room}' hat keine Block-/Etagen-/Bereichs-/Nummern-Angaben."
        )
    return location_adapter.validate_python({"school": school, "room": room_data})


@click.command("render")
@click.option("--school", type=click.Choice(["highfield", "fearnhill"]), required=True,
              help="Schule des Raums.")
@click.option("--room", "room", type=click.Choice(ROOM_KINDS), required=True,
              help="Raumart.")
@click.option("--block", type=click.Choice([b.value for b in HighfieldBlock]),
              default=None, help="Block (nur Highfield-Klassenräume).")
@click.option("--floor", type=click.Choice(FLOOR_CHOICES), default=None,
              help="Etage: G oder 1–9 (nur Highfield-Klassenräume).")
@click.option("--section", type=click.Choice([s.value for s in FearnhillSection]),
              default=None, help="Fachbereich (nur Fearnhill-Klassenräume).")
@click.option("--number", type=int, default=None,
              help="Raumnummer 1–99 (nur Klassenräume).")
def cmd_render(school, room, block, floor, section, number):
    """Gibt die Kennung eines einzelnen Raums aus."""
    try:
        location = _build_location(school, room, block, floor, section, number)
    except ValidationError as e:
        errors = "; ".join(err["msg"] for err in e.errors())
        _abort(f"Ungültiger Raum: {errors}")
    except ValueError as e:
        _abort(str(e))
    logger.info(f"Standort: {location!r}")
    click.echo(location.render())


# ─── CODES ────────────────────────────────────────────────────────────────────

@click.command("codes")
def cmd_codes():
    """Zeigt die Kürzel der Highfield-Blöcke und Fearnhill-Bereiche."""
    from export.helpers import block_codes, section_codes

    table = Table(title="Highfield-Blöcke", box=box.ROUNDED)
    table.add_column("Block")
    table.add_column("Kürzel", style="bold")
    for name, code in block_codes():
        table.add_row(name, code)
    console.print(table)

    table2 = Table(title="Fearnhill-Bereiche", box=box.ROUNDED)
    table2.add_column("Bereich")
    table2.add_column("Kürzel", style="bold")
    for name, code in section_codes():
        table2.add_row(name, code)
    console.print(table2)


# ─── LABELS ───────────────────────────────────────────────────────────────────

@click.command("labels")
@click.argument("rooms_file", type=click.Path(path_type=Path),
                default=str(DEFAULT_ROOMS_YAML))
@click.option("--xlsx", "xlsx_path", type=click.Path(path_type=Path), default=None,
              help="Raumliste zusätzlich als Excel-Datei speichern.")
def cmd_labels(rooms_file: Path, xlsx_path: Optional[Path]):
    """Zeigt alle Kennungen einer Raumliste (YAML) als Tabelle."""
    from config.manager import RoomListManager
    from export.helpers import find_duplicate_labels, label_rows

    try:
        config = RoomListManager().load(rooms_file)
    except (FileNotFoundError, ValueError) as e:
        _abort(str(e))

    duplicates: dict[str, int] = {}
    if config.warn_on_duplicates:
        duplicates = find_duplicate_labels(config.locations)

    table = Table(title=escape(config.title), box=box.ROUNDED)
    table.add_column("Schule")
    table.add_column("Raumart")
    table.add_column("Kennung", style="bold")
    for school, kind, label in label_rows(config.locations):
        shown = f"[red]{escape(label)}[/red]" if label in duplicates else escape(label)
        table.add_row(school, kind, shown)
    console.print(table)

    if duplicates:
        console.print(
            f"[yellow]Warnung: {len(duplicates)} Kennung(en) mehrfach vergeben: "
            f"{escape(', '.join(sorted(duplicates)))}[/yellow]"
        )

    if xlsx_path is not None:
        from export.excel_export import LabelExcelExporter
        out = LabelExcelExporter(config).export(xlsx_path)
        console.print(f"[green]✓[/green] Excel gespeichert: {out}")


# ─── TEMPLATE ─────────────────────────────────────────────────────────────────

@click.command("template")
@click.argument("path", type=click.Path(path_type=Path),
                default=str(DEFAULT_ROOMS_YAML))
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Datei ohne Rückfrage überschreiben.")
def cmd_template(path: Path, force: bool):
    """Erzeugt eine Beispiel-Raumliste mit allen Raumarten."""
    from config.defaults import default_room_list
    from config.manager import RoomListManager

    if path.exists() and not force:
        if not click.confirm(f"{path} existiert bereits. Überschreiben?", default=False):
            return
    RoomListManager().save(default_room_list(), path)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Ausführliche Log-Ausgaben.")
def cli(verbose: bool):
    """Raumkennungen für die Highfield- und Fearnhill-Schule."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_render)
cli.add_command(cmd_codes)
cli.add_command(cmd_labels)
cli.add_command(cmd_template)


if __name__ == "__main__":
    main()
