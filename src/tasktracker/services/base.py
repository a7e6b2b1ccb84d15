"""Helpers shared by the service layer."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import InternalError
from src.tasktracker.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def store_errors(session: AsyncSession, action: str) -> AsyncGenerator[None]:
    """Translate persistence failures into InternalError.

    Rolls the session back, logs the original exception with its traceback
    and raises ``InternalError("Server error <action>.")``. Domain errors
    raised inside the block pass through untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        await session.rollback()
        logger.exception("Persistence store failure", action=action)
        raise InternalError(f"Server error {action}.") from e
