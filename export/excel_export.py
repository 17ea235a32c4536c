"""Excel-Export einer Raumliste (openpyxl)."""

import logging
from pathlib import Path

from config.schema import RoomListConfig

from export.helpers import COLORS, find_duplicate_labels, label_rows, today_str

logger = logging.getLogger(__name__)


class LabelExcelExporter:
    """Exportiert eine RoomListConfig als Tabellenblatt "Raumliste".

    Aufbau: Zeile 1 Titel, Zeile 2 Erstellungsdatum, Zeile 4 Kopfzeile
    (Schule | Raumart | Kennung), ab Zeile 5 ein Standort pro Zeile.
    """

    SHEET_TITLE = "Raumliste"
    HEADERS = ["Schule", "Raumart", "Kennung"]
    HEADER_ROW = 4

    # Spaltenbreiten (Excel-Einheiten)
    COL_SCHOOL_W = 14
    COL_KIND_W   = 18
    COL_LABEL_W  = 20

    def __init__(self, config: RoomListConfig):
        self.config = config

    # ─── Öffentliche API ──────────────────────────────────────────────────────

    def export(self, output_path: Path) -> Path:
        """Erstellt die Excel-Datei und gibt den Pfad zurück."""
        from openpyxl import Workbook
        wb = Workbook()
        ws = wb.active
        ws.title = self.SHEET_TITLE

        self._setup_sheet(ws)
        self._write_title(ws)
        self._write_header_row(ws)
        self._write_rows(ws)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
        logger.info(f"Excel-Export: {len(self.config.locations)} Standorte → {output_path}")
        return output_path

    # ─── Style-Helpers ────────────────────────────────────────────────────────

    def _fill(self, hex_color: str):
        from openpyxl.styles import PatternFill
        return PatternFill(start_color=hex_color, end_color=hex_color, fill_type="solid")

    def _thin_border(self):
        from openpyxl.styles import Border, Side
        s = Side(border_style="thin", color="BBBBBB")
        return Border(left=s, right=s, top=s, bottom=s)

    def _setup_sheet(self, ws) -> None:
        ws.column_dimensions["A"].width = self.COL_SCHOOL_W
        ws.column_dimensions["B"].width = self.COL_KIND_W
        ws.column_dimensions["C"].width = self.COL_LABEL_W

    # ─── Inhalte ──────────────────────────────────────────────────────────────

    def _write_title(self, ws) -> None:
        from openpyxl.styles import Font
        ws.cell(row=1, column=1, value=self.config.title).font = Font(bold=True, size=14)
        ws.cell(row=2, column=1, value=f"Erstellt: {today_str()}")

    def _write_header_row(self, ws) -> None:
        """Schreibt die Kopfzeile (Schule | Raumart | Kennung)."""
        from openpyxl.styles import Alignment, Font
        fill = self._fill(COLORS["header"])
        border = self._thin_border()
        for col, text in enumerate(self.HEADERS, 1):
            cell = ws.cell(row=self.HEADER_ROW, column=col, value=text)
            cell.fill = fill
            cell.font = Font(bold=True, color="FFFFFF", size=10)
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = border

    def _write_rows(self, ws) -> None:
        from openpyxl.styles import Font
        locations = self.config.locations
        duplicates = (
            find_duplicate_labels(locations) if self.config.warn_on_duplicates else {}
        )
        border = self._thin_border()

        row = self.HEADER_ROW + 1
        for loc, values in zip(locations, label_rows(locations)):
            label = values[2]
            color = COLORS["duplicate"] if label in duplicates else COLORS.get(loc.school)
            for col, value in enumerate(values, 1):
                c = ws.cell(row=row, column=col, value=value)
                c.border = border
                if color:
                    c.fill = self._fill(color)
            ws.cell(row=row, column=3).font = Font(bold=True)
            row += 1
