"""User profile endpoints."""

from fastapi import APIRouter

from src.tasktracker.api.dependencies import CurrentUser
from src.tasktracker.schemas import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
async def get_current_user(current_user: CurrentUser) -> UserRead:
    """Get current authenticated user."""
    return UserRead.model_validate(current_user)
