# app/api/users.py

from typing import List

from fastapi import APIRouter, Depends

from app.context import AppContext, get_context
from app.errors import StorageFailure
from app.models.users import AccountRecord, AccountResponse, LoginIn, RegisterIn
from app.services import accounts

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/register", response_model=AccountResponse, status_code=201)
def register_user(
    body: RegisterIn,
    ctx: AppContext = Depends(get_context),
) -> AccountResponse:
    """
    Create an account. 400 if the username is already taken.
    """
    try:
        user = accounts.register(ctx, body.username, body.password, body.email)
    except StorageFailure as exc:
        raise StorageFailure("Registration failed", detail=exc.detail) from exc

    return AccountResponse(message="User registered successfully", user=user)


@router.post("/login", response_model=AccountResponse)
def login(
    body: LoginIn,
    ctx: AppContext = Depends(get_context),
) -> AccountResponse:
    """
    Check a username/password pair. 404 for an unknown user, 401 for a wrong password.
    """
    try:
        user = accounts.authenticate(ctx, body.username, body.password)
    except StorageFailure as exc:
        raise StorageFailure("Login failed", detail=exc.detail) from exc

    return AccountResponse(message="Login successful", user=user)


@router.get("/users", response_model=List[AccountRecord])
def list_users(ctx: AppContext = Depends(get_context)) -> List[AccountRecord]:
    """
    Return every account, password included.
    """
    try:
        return accounts.list_accounts(ctx)
    except StorageFailure as exc:
        raise StorageFailure("Query failed", detail=exc.detail) from exc
