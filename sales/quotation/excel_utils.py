"""
Excel export of the quotation log.

Produces the same layout as the Google Sheets tab for a year, for offline
reporting or when the sheet is not configured.
"""
from io import BytesIO

from django.http import HttpResponse
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from sales.integrations.google_sheets import SHEET_HEADER, build_quotation_row, tab_title_for_year


HEADER_FILL = PatternFill(start_color='E6E6E6', end_color='E6E6E6', fill_type='solid')


def build_quotation_workbook(quotations, year, product_names):
    """Workbook with one sheet "Quotation {year}": header row + one row per quotation"""
    wb = Workbook()
    ws = wb.active
    ws.title = tab_title_for_year(year)

    headers = SHEET_HEADER + list(product_names)
    for col_idx, label in enumerate(headers, start=1):
        cell = ws.cell(row=1, column=col_idx, value=label)
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL
    ws.freeze_panes = 'A2'

    for row_idx, quotation in enumerate(quotations, start=2):
        row = build_quotation_row(quotation, product_names)
        for col_idx, value in enumerate(row, start=1):
            ws.cell(row=row_idx, column=col_idx, value=value)

    for col_idx in range(1, len(headers) + 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = 18

    return wb


def export_quotations_to_excel(quotations, year, product_names):
    """HttpResponse with the workbook as an .xlsx attachment"""
    wb = build_quotation_workbook(quotations, year, product_names)

    output = BytesIO()
    wb.save(output)
    output.seek(0)

    response = HttpResponse(
        output.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename=Quotation_{year}.xlsx'
    return response
