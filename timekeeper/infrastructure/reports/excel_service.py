"""
Spreadsheet generation with pandas and openpyxl.
"""

import io
from typing import Iterable, List, Dict, Any

import pandas as pd
from openpyxl.styles import Font, PatternFill

from timekeeper.domain.models.report import OwnerReport


XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADER_FILL = PatternFill(fill_type="solid", start_color="4E7BEE", end_color="4E7BEE")
HEADER_FONT = Font(bold=True, color="FFFFFF")


class ExcelReportService:
    """Builds monthly summary workbooks in memory."""

    owner_sheet = "Time Report"
    all_owners_sheet = "All Workers Report"

    def render_owner_summary(self, report: OwnerReport) -> bytes:
        """One summary row for a single account."""
        rows = [self._summary_row(report, with_position=False)]
        return self._write(rows, self.owner_sheet)

    def render_all_owners(self, reports: Iterable[OwnerReport]) -> bytes:
        """One summary row per account, in the given order."""
        rows = [self._summary_row(report, with_position=True) for report in reports]
        return self._write(rows, self.all_owners_sheet)

    @staticmethod
    def _summary_row(report: OwnerReport, with_position: bool) -> Dict[str, Any]:
        row = {
            "Employee ID": report.account.employee_id,
            "Username": report.account.username,
        }
        if with_position:
            row["Position"] = report.account.position.display_name
        row.update({
            "Total Hours": round(report.stat.total_hours, 1),
            "Total Days": report.stat.total_days,
            "Regular Days": report.stat.regular_days,
            "Overtime Days": report.stat.overtime_days,
        })
        return row

    def _write(self, rows: List[Dict[str, Any]], sheet_name: str) -> bytes:
        df = pd.DataFrame(rows)

        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)
            worksheet = writer.sheets[sheet_name]
            for cell in worksheet[1]:
                cell.font = HEADER_FONT
                cell.fill = HEADER_FILL
            for column_cells in worksheet.columns:
                width = max(len(str(cell.value)) for cell in column_cells if cell.value is not None)
                worksheet.column_dimensions[column_cells[0].column_letter].width = max(width + 2, 15)

        return output.getvalue()

    @staticmethod
    def owner_filename(report: OwnerReport) -> str:
        return f"time-report-{report.period.month_name}-{report.period.year}.xlsx"

    @staticmethod
    def all_owners_filename(month: int, year: int) -> str:
        return f"all-workers-report-{month}-{year}.xlsx"
