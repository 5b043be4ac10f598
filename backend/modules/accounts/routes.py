"""
Account API endpoints.

Registration, login and management of the caller's own identity.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_account_service
from shared.models import AuthenticatedUser

from .interfaces import IAccountService
from .models import (
    AccountResponse,
    ActionResponse,
    AuthResponse,
    DeleteAccountRequest,
    LoginRequest,
    PasswordChangeRequest,
    RegisterRequest,
    SettingsResponse,
    SettingsUpdateRequest,
)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAccountService = Depends(get_account_service),
) -> AuthResponse:
    """Create an account and return a session token."""
    session = await service.register(
        username=request.username,
        email=request.email,
        password=request.password,
        name=request.name,
    )
    return AuthResponse(
        message="User registered successfully",
        token=session.token,
        user=session.user,
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAccountService = Depends(get_account_service),
) -> AuthResponse:
    """Exchange email and password for a session token."""
    session = await service.login(request.email, request.password)
    return AuthResponse(
        message="Login successful",
        token=session.token,
        user=session.user,
    )


@router.get("/profile", response_model=AccountResponse)
async def get_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> AccountResponse:
    """Get the caller's identity and the profiles it owns."""
    return AccountResponse(user=await service.get_account(user))


@router.put("/settings", response_model=SettingsResponse)
async def update_settings(
    request: SettingsUpdateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> SettingsResponse:
    updated = await service.update_settings(user, request)
    return SettingsResponse(message="Settings updated successfully", user=updated)


@router.put("/password", response_model=ActionResponse)
async def change_password(
    request: PasswordChangeRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> ActionResponse:
    await service.change_password(user, request.current_password, request.new_password)
    return ActionResponse(message="Password updated successfully")


@router.delete("/account", response_model=ActionResponse)
async def delete_account(
    request: DeleteAccountRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAccountService = Depends(get_account_service),
) -> ActionResponse:
    """
    Delete the caller's account.

    Requires the password again, so a stolen session token alone cannot
    destroy the account.
    """
    await service.delete_account(user, request.password)
    return ActionResponse(message="Account deleted successfully")
