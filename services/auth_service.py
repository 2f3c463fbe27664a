import logging

from fastapi import HTTPException

from core.config import settings
from core.security import hash_password, verify_password, create_access_token
from models.user import User, UserRole
from schemas.user import AuthResponse, UserCreate, UserRead
from services.storage import CharityStorage

logger = logging.getLogger(__name__)

# bcrypt hash of a throwaway password; verified against when the username is
# unknown so both login failures cost the same
_DUMMY_HASH = hash_password("not-a-real-password")


class AuthService:
    def __init__(self, storage: CharityStorage):
        self.storage = storage

    # ------------------------------------------------
    # REGISTER
    # ------------------------------------------------
    async def register_user(self, data: UserCreate) -> AuthResponse:
        if data.role == UserRole.ADMIN and not settings.ALLOW_ADMIN_REGISTRATION:
            raise HTTPException(403, "Admin registration is disabled")

        # duplicate check
        if await self.storage.get_user_by_username(data.username):
            raise HTTPException(400, "Username already exists")

        if await self.storage.get_user_by_email(data.email):
            raise HTTPException(400, "Email already exists")

        user = await self.storage.create_user(
            username=data.username,
            email=data.email,
            hashed_password=hash_password(data.password),
            name=data.name,
            role=data.role,
        )
        logger.info(f"Registered user {user.id} ({user.role.value})")

        return self.create_token(user)

    # ------------------------------------------------
    # LOGIN
    # ------------------------------------------------
    async def authenticate_user(self, username: str, password: str) -> User:
        user = await self.storage.get_user_by_username(username)

        if not user:
            verify_password(password, _DUMMY_HASH)
            logger.warning(f"Login failed for unknown username {username!r}")
            raise HTTPException(401, "Invalid credentials")

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Login failed for user {user.id}")
            raise HTTPException(401, "Invalid credentials")

        return user

    # ------------------------------------------------
    # TOKEN
    # ------------------------------------------------
    def create_token(self, user: User) -> AuthResponse:
        token = create_access_token(
            user_id=user.id,
            username=user.username,
            role=user.role.value,
        )
        return AuthResponse(user=UserRead.model_validate(user), token=token)
