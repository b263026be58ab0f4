"""
Time tracking router.
Handles time entry management and monthly report downloads.
"""

from typing import List
from fastapi import APIRouter, status
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from timekeeper.application.dto.base_dto import MessageResponseDTO
from timekeeper.application.dto.time_entry_dto import TimeEntryRequestDTO, TimeEntryResponseDTO
from timekeeper.application.use_cases.time_entry_use_cases import (
    UpdateTimeEntryRequest,
    CreateTimeEntryUseCase,
    UpdateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    ListMyTimeEntriesUseCase,
    ListAllTimeEntriesUseCase,
    DailyTimeEntriesUseCase,
    WeeklyTimeEntriesUseCase,
)
from timekeeper.application.use_cases.report_use_cases import (
    parse_period,
    OwnerReportRequest,
    BuildOwnerReportUseCase,
    BuildAllOwnersReportUseCase,
)
from timekeeper.domain.models.account import Account
from timekeeper.infrastructure.auth import CurrentAccount, CurrentAdmin
from timekeeper.infrastructure.reports.excel_service import XLSX_MEDIA_TYPE
from timekeeper.infrastructure.web.dependencies import (
    AccountRepositoryDep,
    TimeEntryRepositoryDep,
    EventDispatcherDep,
    PDFServiceDep,
    ExcelServiceDep,
)


router = APIRouter()


def attachment(content: bytes, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TimeEntryResponseDTO)
async def create_time_entry(
    request: TimeEntryRequestDTO,
    account: CurrentAccount,
    repository: TimeEntryRepositoryDep,
    event_dispatcher: EventDispatcherDep
):
    """
    Record a work interval.

    - **date**: calendar date (YYYY-MM-DD)
    - **start_time** / **end_time**: ISO-8601 timestamps, start before end
    - **overtime_reason**: optional, for shifts over 12 hours
    - **responsible_person**: optional, shown for "Company Request" overtime

    Overlapping an existing entry of the same day is rejected with 409.
    """
    use_case = CreateTimeEntryUseCase(repository, event_dispatcher)
    use_case.set_current_account(account)
    return await use_case.execute(request)


@router.get("/my-entries", response_model=List[TimeEntryResponseDTO])
async def list_my_time_entries(account: CurrentAccount, repository: TimeEntryRepositoryDep):
    """Entries of the caller, newest first."""
    use_case = ListMyTimeEntriesUseCase(repository)
    use_case.set_current_account(account)
    return await use_case.execute(None)


@router.get("/all", response_model=List[TimeEntryResponseDTO])
async def list_all_time_entries(
    admin: CurrentAdmin,
    repository: TimeEntryRepositoryDep,
    account_repository: AccountRepositoryDep
):
    """Entries of every account, newest first."""
    use_case = ListAllTimeEntriesUseCase(repository, account_repository)
    use_case.set_current_account(admin)
    return await use_case.execute(None)


@router.get("/daily/{entry_date}", response_model=List[TimeEntryResponseDTO])
async def list_daily_time_entries(entry_date: str, account: CurrentAccount, repository: TimeEntryRepositoryDep):
    use_case = DailyTimeEntriesUseCase(repository)
    use_case.set_current_account(account)
    return await use_case.execute(entry_date)


@router.get("/weekly/{start_date}", response_model=List[TimeEntryResponseDTO])
async def list_weekly_time_entries(start_date: str, account: CurrentAccount, repository: TimeEntryRepositoryDep):
    """Entries in the seven days beginning at start_date."""
    use_case = WeeklyTimeEntriesUseCase(repository)
    use_case.set_current_account(account)
    return await use_case.execute(start_date)


@router.put("/{entry_id}", response_model=TimeEntryResponseDTO)
async def update_time_entry(
    entry_id: int,
    request: TimeEntryRequestDTO,
    account: CurrentAccount,
    repository: TimeEntryRepositoryDep
):
    """
    Replace date, interval and overtime details of an entry the caller owns.
    """
    use_case = UpdateTimeEntryUseCase(repository)
    use_case.set_current_account(account)
    return await use_case.execute(UpdateTimeEntryRequest(entry_id=entry_id, data=request))


@router.delete("/{entry_id}", response_model=MessageResponseDTO)
async def delete_time_entry(entry_id: int, account: CurrentAccount, repository: TimeEntryRepositoryDep):
    use_case = DeleteTimeEntryUseCase(repository)
    use_case.set_current_account(account)
    return await use_case.execute(entry_id)


async def _owner_report(
    caller: Account,
    user_id: int,
    month: str,
    year: str,
    repository: TimeEntryRepositoryDep,
    account_repository: AccountRepositoryDep
):
    use_case = BuildOwnerReportUseCase(repository, account_repository)
    use_case.set_current_account(caller)
    return await use_case.execute(OwnerReportRequest(user_id=user_id, period=parse_period(month, year)))


@router.get("/my-pdf/{month}/{year}")
async def download_my_pdf(
    month: str,
    year: str,
    account: CurrentAccount,
    repository: TimeEntryRepositoryDep,
    account_repository: AccountRepositoryDep,
    pdf_service: PDFServiceDep
):
    """Monthly PDF report of the caller."""
    report = await _owner_report(account, account.id, month, year, repository, account_repository)
    content = await run_in_threadpool(pdf_service.render_owner_report, report)
    return attachment(content, "application/pdf", pdf_service.filename(report))


@router.get("/worker-pdf/{user_id}/{month}/{year}")
async def download_worker_pdf(
    user_id: int,
    month: str,
    year: str,
    account: CurrentAccount,
    repository: TimeEntryRepositoryDep,
    account_repository: AccountRepositoryDep,
    pdf_service: PDFServiceDep
):
    """Monthly PDF report of one account. Owner or admin."""
    report = await _owner_report(account, user_id, month, year, repository, account_repository)
    content = await run_in_threadpool(pdf_service.render_owner_report, report)
    return attachment(content, "application/pdf", pdf_service.filename(report))


@router.get("/worker-excel/{user_id}/{month}/{year}")
async def download_worker_excel(
    user_id: int,
    month: str,
    year: str,
    account: CurrentAccount,
    repository: TimeEntryRepositoryDep,
    account_repository: AccountRepositoryDep,
    excel_service: ExcelServiceDep
):
    """Monthly summary spreadsheet of one account. Owner or admin."""
    report = await _owner_report(account, user_id, month, year, repository, account_repository)
    content = await run_in_threadpool(excel_service.render_owner_summary, report)
    return attachment(content, XLSX_MEDIA_TYPE, excel_service.owner_filename(report))


@router.get("/all-workers-excel/{month}/{year}")
async def download_all_workers_excel(
    month: str,
    year: str,
    admin: CurrentAdmin,
    repository: TimeEntryRepositoryDep,
    account_repository: AccountRepositoryDep,
    excel_service: ExcelServiceDep
):
    """Monthly summary spreadsheet with one row per account."""
    period = parse_period(month, year)
    use_case = BuildAllOwnersReportUseCase(repository, account_repository)
    use_case.set_current_account(admin)
    reports = await use_case.execute(period)
    content = await run_in_threadpool(excel_service.render_all_owners, reports)
    return attachment(content, XLSX_MEDIA_TYPE, excel_service.all_owners_filename(period.month, period.year))
