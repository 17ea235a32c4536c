"""Raumlisten-Manager: Laden und Speichern von Raumlisten.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from ruamel.yaml import YAML, YAMLError
from ruamel.yaml.comments import CommentedMap

from config.schema import RoomListConfig

logger = logging.getLogger(__name__)

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


_YAML_HEADER = f"""\
# ============================================
# Raumkennungen — Raumliste
# Schulen: Highfield (ohne Präfix), Fearnhill ("FH ")
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_FIELD_COMMENTS = {
    "locations": (
        "Standorte",
        "school: highfield | fearnhill\n"
        "Highfield room.kind: hall | sports_hall | classroom (block, floor.level, discriminator)\n"
        "Fearnhill room.kind: sports_hall | gym | dance_studio | drama_studio | classroom (section, discriminator)",
    ),
}


class RoomListManager:
    DEFAULT_PATH = Path("config") / "rooms.yaml"

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> RoomListConfig:
        """Lade Raumliste aus YAML. Validiert automatisch via Pydantic."""
        target = Path(path) if path is not None else self.DEFAULT_PATH
        if not target.exists():
            raise FileNotFoundError(
                f"Raumliste nicht gefunden: {target}\n"
                f"Mit 'python main.py template {target}' kann eine Vorlage erzeugt werden."
            )
        with open(target, "r", encoding="utf-8") as f:
            try:
                raw = yaml.load(f)
            except YAMLError as e:
                raise ValueError(
                    f"Raumliste ungültig: {target}\n"
                    f"YAML-Fehler: {e}"
                ) from e
        if raw is None:
            raw = {}
        try:
            config = RoomListConfig.model_validate(raw)
        except ValidationError as e:
            raise ValueError(
                f"Raumliste ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e
        logger.info(f"Raumliste geladen: {target} ({len(config.locations)} Standorte)")
        return config

    # ─── Speichern ───

    def save(self, config: RoomListConfig, path: Optional[Path] = None) -> Path:
        """Speichere Raumliste als YAML mit Kommentaren."""
        target = Path(path) if path is not None else self.DEFAULT_PATH
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Raumliste gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: RoomListConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        cm = CommentedMap(config.model_dump(mode="json"))

        for field, (label, comment) in _FIELD_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        return cm
