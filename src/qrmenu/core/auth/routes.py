"""Authentication API routes.

Provides endpoints for:
- Owner registration
- Login
- The current account and its shop
"""

from fastapi import APIRouter, status

from qrmenu.core.auth.dependencies import CurrentAccount
from qrmenu.core.auth.service import AuthSvc
from qrmenu.modules.accounts.schemas import (
    AccountResponse,
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from qrmenu.modules.shops.schemas import ShopSummary


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an owner account",
    description="Creates an owner account and returns an access token.",
)
async def register(data: RegisterRequest, service: AuthSvc) -> AuthResponse:
    """Register a new owner account."""
    account, token = await service.register(
        email=data.email,
        password=data.password,
        name=data.name,
    )
    return AuthResponse(token=token, account=AccountResponse.model_validate(account))


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login with email and password",
    description="Returns an access token and the account's first owned shop, if any.",
)
async def login(data: LoginRequest, service: AuthSvc) -> AuthResponse:
    """Login with email and password."""
    account, token, shop = await service.login(email=data.email, password=data.password)
    return AuthResponse(
        token=token,
        account=AccountResponse.model_validate(account),
        shop=ShopSummary.model_validate(shop) if shop else None,
    )


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Get current account",
    description="Returns the authenticated account and its first owned shop.",
)
async def get_me(current_account: CurrentAccount, service: AuthSvc) -> MeResponse:
    """Get current account profile."""
    shop = await service.first_owned_shop(current_account)
    return MeResponse(
        account=AccountResponse.model_validate(current_account),
        shop=ShopSummary.model_validate(shop) if shop else None,
    )
