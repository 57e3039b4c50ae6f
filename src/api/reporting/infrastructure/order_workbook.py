"""Order export rendered as an xlsx workbook with openpyxl."""

from __future__ import annotations

from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from reporting.domain.value_objects import OrderExportRow
from reporting.ports.repositories import IOrderWorkbookWriter

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# (header, column width)
COLUMNS = (
    ("Order Number", 15),
    ("Status", 15),
    ("Date", 20),
    ("Customer Name", 20),
    ("Email", 25),
    ("Phone", 15),
    ("Address", 30),
    ("Total Amount", 15),
    ("Payment Method", 15),
    ("Items", 50),
    ("Notes", 20),
)


class OrderWorkbookWriter(IOrderWorkbookWriter):
    """One ``Orders`` sheet with a bold header row."""

    sheet_title = "Orders"

    def write(self, rows: list[OrderExportRow]) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = self.sheet_title

        sheet.append([header for header, _ in COLUMNS])
        for cell in sheet[1]:
            cell.font = Font(bold=True)
        for index, (_, width) in enumerate(COLUMNS, start=1):
            sheet.column_dimensions[get_column_letter(index)].width = width

        for row in rows:
            sheet.append(
                [
                    row.order_number,
                    row.status,
                    row.created_at.strftime("%Y-%m-%d %H:%M:%S"),
                    row.contact_name,
                    row.contact_email,
                    row.contact_phone,
                    row.delivery_address,
                    row.total_amount,
                    row.payment_method,
                    row.items_summary,
                    row.notes,
                ]
            )

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()
