"""
Report renderers.
"""

from .pdf_service import PDFReportService
from .excel_service import ExcelReportService, XLSX_MEDIA_TYPE

__all__ = ["PDFReportService", "ExcelReportService", "XLSX_MEDIA_TYPE"]
