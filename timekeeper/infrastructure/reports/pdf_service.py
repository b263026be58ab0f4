"""
PDF generation service using WeasyPrint and Jinja2.
Renders monthly time reports for a single account.
"""

from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional
from jinja2 import Environment, FileSystemLoader, select_autoescape

from timekeeper.config import Settings, get_settings
from timekeeper.domain.models.report import OwnerReport


class PDFReportService:
    """Service for generating PDF documents from templates."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the PDF service with template environment."""
        self.settings = settings or get_settings()
        self.templates_dir = Path(__file__).parent / "templates"

        # Setup Jinja2 environment
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(['html', 'xml'])
        )

        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters."""

        def hours_format(value: Optional[float]) -> str:
            """One decimal place, or n/a when there is no value."""
            if value is None:
                return "n/a"
            return f"{value:.1f}"

        def time_format(value: datetime) -> str:
            return value.strftime("%H:%M")

        self.env.filters['hours'] = hours_format
        self.env.filters['clock'] = time_format

    def render_html(self, report: OwnerReport, template_name: str = "time_report.html") -> str:
        """Render the report template to an HTML string."""
        template = self.env.get_template(template_name)
        return template.render(**self._prepare_context(report))

    def render_owner_report(self, report: OwnerReport, template_name: str = "time_report.html") -> bytes:
        """
        Generate the PDF for one account's month.

        Returns:
            bytes: the PDF document
        """
        # WeasyPrint loads Pango and Cairo on import
        from weasyprint import HTML

        html_content = self.render_html(report, template_name)
        html_doc = HTML(string=html_content, base_url=str(self.templates_dir))
        return html_doc.write_pdf()

    def _prepare_context(self, report: OwnerReport) -> Dict[str, Any]:
        """Prepare template context for report rendering."""
        return {
            "title": f"Time Report - {report.period.label}",
            "company": {"name": self.settings.company_name},
            "account": {
                "username": report.account.username,
                "position": report.account.position.display_name,
                "employee_id": report.account.employee_id,
            },
            "stat": report.stat,
            "entries": [
                {
                    "date": entry.date.isoformat(),
                    "start_time": entry.start_time,
                    "end_time": entry.end_time,
                    "hours": entry.hours,
                    "status": entry.status_label,
                    "is_overtime": entry.is_overtime,
                    "overtime_reason": entry.overtime_reason if entry.is_overtime else None,
                    "responsible_person": (
                        entry.responsible_person if entry.shows_responsible_person else None
                    ),
                }
                for entry in report.entries
            ],
            "now": datetime.now()
        }

    @staticmethod
    def filename(report: OwnerReport) -> str:
        return f"time-report-{report.period.month_name}-{report.period.year}.pdf"
