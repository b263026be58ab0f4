"""
Authentication router.
Handles registration, login, admin bootstrap and the caller's profile.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, status

from timekeeper.application.dto.account_dto import (
    RegisterRequestDTO,
    LoginRequestDTO,
    AccountResponseDTO,
    AuthResponseDTO,
)
from timekeeper.application.use_cases.account_use_cases import (
    RegisterAccountUseCase,
    LoginUseCase,
    CreateAdminUseCase,
)
from timekeeper.infrastructure.auth import (
    CurrentAccount,
    OptionalAccount,
    JWTHandler,
    PasswordHasher,
    get_jwt_handler,
    get_password_hasher,
)
from timekeeper.infrastructure.web.dependencies import AccountRepositoryDep


router = APIRouter()

JWTHandlerDep = Annotated[JWTHandler, Depends(get_jwt_handler)]
PasswordHasherDep = Annotated[PasswordHasher, Depends(get_password_hasher)]


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponseDTO)
async def register(
    request: RegisterRequestDTO,
    repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep,
    jwt_handler: JWTHandlerDep
):
    """
    Register a new (non-admin) account and sign it in.

    - **username**: at least 3 characters, unique
    - **password**: at least 6 characters
    - **position**: worker or rider
    - **employee_id**: letters, digits and hyphens, unique
    """
    use_case = RegisterAccountUseCase(repository, password_hasher, jwt_handler)
    return await use_case.execute(request)


@router.post("/login", response_model=AuthResponseDTO)
async def login(
    request: LoginRequestDTO,
    repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep,
    jwt_handler: JWTHandlerDep
):
    """
    Exchange username and password for a bearer token valid for 24 hours.
    """
    use_case = LoginUseCase(repository, password_hasher, jwt_handler)
    return await use_case.execute(request)


@router.post("/create-admin", status_code=status.HTTP_201_CREATED, response_model=AuthResponseDTO)
async def create_admin(
    request: RegisterRequestDTO,
    caller: OptionalAccount,
    repository: AccountRepositoryDep,
    password_hasher: PasswordHasherDep,
    jwt_handler: JWTHandlerDep
):
    """
    Create an admin account.

    Anyone may create the first admin; once one exists the caller must be
    an admin.
    """
    use_case = CreateAdminUseCase(repository, password_hasher, jwt_handler)
    use_case.set_current_account(caller)
    return await use_case.execute(request)


@router.get("/me", response_model=AccountResponseDTO)
async def get_current_user_profile(account: CurrentAccount):
    """Profile of the authenticated account."""
    return AccountResponseDTO.from_domain(account)
