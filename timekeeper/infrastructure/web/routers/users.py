"""
Users router.
Account administration; every endpoint requires an admin.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, status

from timekeeper.application.dto.account_dto import CreateAccountRequestDTO, AccountResponseDTO
from timekeeper.application.use_cases.account_use_cases import CreateAccountUseCase, ListAccountsUseCase
from timekeeper.infrastructure.auth import CurrentAdmin, PasswordHasher, get_password_hasher
from timekeeper.infrastructure.web.dependencies import AccountRepositoryDep


router = APIRouter()

PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]


@router.get("", response_model=List[AccountResponseDTO])
@router.get("/list", response_model=List[AccountResponseDTO])
async def list_users(admin: CurrentAdmin, repository: AccountRepositoryDep):
    """List all accounts."""
    use_case = ListAccountsUseCase(repository)
    use_case.set_current_account(admin)
    return await use_case.execute(None)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountResponseDTO)
@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AccountResponseDTO)
async def create_user(
    request: CreateAccountRequestDTO,
    admin: CurrentAdmin,
    repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep
):
    """
    Create an account, optionally with admin rights.
    """
    use_case = CreateAccountUseCase(repository, password_hasher)
    use_case.set_current_account(admin)
    return await use_case.execute(request)


@router.post("/register-worker", status_code=status.HTTP_201_CREATED, response_model=AccountResponseDTO)
async def register_worker(
    request: CreateAccountRequestDTO,
    admin: CurrentAdmin,
    repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep
):
    """
    Create a non-admin account. Any admin flag in the body is ignored.
    """
    use_case = CreateAccountUseCase(repository, password_hasher, allow_admin=False)
    use_case.set_current_account(admin)
    return await use_case.execute(request)
