"""Authentication service - registration and login."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import ConflictError
from src.tasktracker.core.logging import get_logger
from src.tasktracker.core.security import (
    DUMMY_PASSWORD_HASH,
    create_access_token,
    hash_password,
    verify_password,
)
from src.tasktracker.models import User
from src.tasktracker.repositories import UserRepository
from src.tasktracker.schemas.auth import LoginResponse
from src.tasktracker.services.base import store_errors

logger = get_logger(__name__)


class AuthService:
    """Issues identities and access tokens for the project/task API."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def register(self, email: str, password: str, full_name: str) -> User:
        """Create a new user account.

        Raises:
            ConflictError: If the email is already registered.
        """
        email = email.lower()
        async with store_errors(self.session, "registering user"):
            if await self.user_repo.exists_by_email(email):
                raise ConflictError("A user with this email already exists.")

            user = User(
                email=email,
                hashed_password=hash_password(password),
                full_name=full_name,
            )
            try:
                self.user_repo.add(user)
                await self.session.commit()
            except IntegrityError as e:
                # Lost a race against a concurrent registration
                await self.session.rollback()
                raise ConflictError("A user with this email already exists.") from e

        logger.info("User registered", user_id=str(user.id))
        return user

    async def authenticate(self, email: str, password: str) -> LoginResponse | None:
        """Check credentials and return an access token.

        Returns None if the user is unknown, inactive or the password is wrong.
        """
        async with store_errors(self.session, "logging in"):
            user = await self.user_repo.get_by_email(email.lower())

        # Always verify so response timing doesn't reveal whether the email exists
        password_hash = user.hashed_password if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid or not user.is_active:
            logger.info("Login failed")
            return None

        return LoginResponse(access_token=create_access_token(user.id))
