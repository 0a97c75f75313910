from __future__ import annotations

import io
import logging
from typing import Sequence

import pandas as pd
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from ..categories.schema import DEFAULT_SCHEMA, CategorySchema
from .model import ReportRow

logger = logging.getLogger(__name__)

SHEET_NAME = "Time Entries"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADER_FILL = PatternFill(fill_type="solid", fgColor="FFE6E6FA")
HEADER_FONT = Font(bold=True)
NEGATIVE_FILL = PatternFill(fill_type="solid", fgColor="FFFFCCCC")
NEGATIVE_FONT = Font(color="FFCC0000", bold=True)


class ExcelReportExporter:
    """Serializes flat report rows to an .xlsx workbook.

    Rows flagged `negative_balance` get their Available Hours cell highlighted.
    """

    def __init__(self, schema: CategorySchema = DEFAULT_SCHEMA):
        self._schema = schema

    def columns(self) -> list[tuple[str, str, int]]:
        """(row key, header, width) in sheet order."""
        cols = [
            ("user_name", "User Name", 20),
            ("ps_number", "PS Number", 15),
            ("date", "Date", 12),
        ]
        cols += [(c.key, c.label, max(10, len(c.label) + 2)) for c in self._schema]
        cols += [
            ("available_hours", "Available Hours", 15),
            ("remarks", "Remarks", 30),
            ("created_at", "Entry Date", 15),
        ]
        return cols

    def export(self, rows: Sequence[ReportRow]) -> bytes:
        cols = self.columns()
        records = []
        for row in rows:
            data = row.to_dict()
            records.append({header: data.get(key) for key, header, _ in cols})

        df = pd.DataFrame(records, columns=[header for _, header, _ in cols])

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
            ws = writer.sheets[SHEET_NAME]

            for idx, (_, _, width) in enumerate(cols, start=1):
                ws.column_dimensions[get_column_letter(idx)].width = width
                cell = ws.cell(row=1, column=idx)
                cell.font = HEADER_FONT
                cell.fill = HEADER_FILL

            available_col = [key for key, _, _ in cols].index("available_hours") + 1
            for offset, row in enumerate(rows, start=2):
                if row.negative_balance:
                    cell = ws.cell(row=offset, column=available_col)
                    cell.fill = NEGATIVE_FILL
                    cell.font = NEGATIVE_FONT

        logger.info("Exported %d report rows to xlsx", len(rows))
        return output.getvalue()
