"""
Per-request wiring of repositories and application services.
"""

from typing import Annotated
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from timekeeper.domain.events.base import EventDispatcher
from timekeeper.infrastructure.db.database import get_db
from timekeeper.infrastructure.reports.excel_service import ExcelReportService
from timekeeper.infrastructure.reports.pdf_service import PDFReportService
from timekeeper.infrastructure.repositories.account_repository import SQLAlchemyAccountRepository
from timekeeper.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository


def get_account_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyAccountRepository:
    """Dependency to get account repository."""
    return SQLAlchemyAccountRepository(session)


def get_time_entry_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyTimeEntryRepository:
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)


def get_event_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.event_dispatcher


def get_pdf_service(request: Request) -> PDFReportService:
    return request.app.state.pdf_service


def get_excel_service(request: Request) -> ExcelReportService:
    return request.app.state.excel_service


AccountRepositoryDep = Annotated[SQLAlchemyAccountRepository, Depends(get_account_repository)]
TimeEntryRepositoryDep = Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)]
EventDispatcherDep = Annotated[EventDispatcher, Depends(get_event_dispatcher)]
PDFServiceDep = Annotated[PDFReportService, Depends(get_pdf_service)]
ExcelServiceDep = Annotated[ExcelReportService, Depends(get_excel_service)]
