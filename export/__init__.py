"""Export-Modul: Excel (openpyxl) für Raumlisten."""

from export.excel_export import LabelExcelExporter

__all__ = ["LabelExcelExporter"]
