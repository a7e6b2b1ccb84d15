"""Authentication endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.tasktracker.api.dependencies import AuthServiceDep
from src.tasktracker.schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
async def register(request: RegisterRequest, service: AuthServiceDep) -> UserRead:
    """Create a user account."""
    user = await service.register(
        email=request.email,
        password=request.password,
        full_name=request.full_name,
    )
    return UserRead.model_validate(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in",
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
async def login(request: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    """Exchange email and password for a bearer access token."""
    result = await service.authenticate(request.email, request.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result
