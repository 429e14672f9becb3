"""
XLSX Writer - Expiry timeline as a spreadsheet.

One sheet, bold header row, frozen below the header, currency columns
formatted so the store team can sort and filter in Excel.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from .models import ExpiryTimeline, Urgency
from .report import TIMELINE_COLUMNS, timeline_rows

logger = logging.getLogger(__name__)

SHEET_TITLE = "Expiry Timeline"
MONEY_FORMAT = "#,##0.00"

# Row fill by urgency tier (ARGB hex)
URGENCY_FILLS = {
    Urgency.CRITICAL: "FFFECACA",
    Urgency.HIGH: "FFFED7AA",
    Urgency.MEDIUM: "FFFEF08A",
}


def build_timeline_workbook(timeline: ExpiryTimeline) -> Workbook:
    """Build an in-memory workbook for a timeline."""
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append(TIMELINE_COLUMNS)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    money_cols = {TIMELINE_COLUMNS.index("unit_price") + 1, TIMELINE_COLUMNS.index("loss") + 1}

    for entry, row in zip(timeline.entries, timeline_rows(timeline)):
        ws.append(row)
        row_num = ws.max_row
        for col in money_cols:
            ws.cell(row=row_num, column=col).number_format = MONEY_FORMAT

        color = URGENCY_FILLS.get(entry.urgency)
        if color:
            fill = PatternFill(start_color=color, end_color=color, fill_type="solid")
            for cell in ws[row_num]:
                cell.fill = fill

    total_row = ws.max_row + 1
    ws.cell(row=total_row, column=1, value="TOTAL").font = Font(bold=True)
    total_cell = ws.cell(row=total_row, column=len(TIMELINE_COLUMNS), value=timeline.total_at_risk)
    total_cell.font = Font(bold=True)
    total_cell.number_format = MONEY_FORMAT

    ws.freeze_panes = "A2"
    for col_idx, header in enumerate(TIMELINE_COLUMNS, start=1):
        width = max(len(header), 12)
        if header == "name":
            width = 32
        ws.column_dimensions[get_column_letter(col_idx)].width = width

    return wb


def write_timeline_xlsx(timeline: ExpiryTimeline, output_path: Optional[Path] = None) -> bytes:
    """
    Write a timeline workbook.

    Args:
        timeline: Timeline to write
        output_path: Optional file to save to

    Returns:
        XLSX file bytes
    """
    wb = build_timeline_workbook(timeline)
    buffer = BytesIO()
    wb.save(buffer)
    content = buffer.getvalue()

    if output_path:
        Path(output_path).write_bytes(content)
        logger.info(f"Wrote {len(timeline.entries)} timeline rows to {output_path}")

    return content
