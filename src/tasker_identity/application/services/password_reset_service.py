import hashlib
import logging
import secrets
from datetime import timedelta

from tasker.domain.shared.time import utc_now
from tasker_identity.domain.user import (
    InvalidEmailError,
    InvalidResetTokenError,
    User,
    UserNotFoundError,
    UserRepository,
)
from tasker_identity.schemas import PasswordResetIssued
from tasker_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class PasswordResetService:
    """Service for issuing and consuming single-use password reset tokens."""

    DEFAULT_TOKEN_EXPIRE_MINUTES = 60

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        token_expire_minutes: int = DEFAULT_TOKEN_EXPIRE_MINUTES,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._token_ttl = timedelta(minutes=token_expire_minutes)

    @staticmethod
    def _hash_token(raw_token: str) -> str:
        return hashlib.sha256(raw_token.encode()).hexdigest()

    async def request_reset(self, email: str) -> PasswordResetIssued:
        """Issue a reset token for the account with this email.

        Any earlier token of the account is overwritten. Raises
        ``UserNotFoundError`` for an unknown email; hiding that from end users
        is up to the caller.
        """
        try:
            user = await self._user_repo.find_by_email(email.strip())
        except InvalidEmailError:
            user = None
        if user is None:
            logger.debug("Password reset requested for unknown email")
            raise UserNotFoundError(email.strip())

        raw_token = secrets.token_urlsafe(32)
        issued_at = utc_now()

        user.issue_reset_token(self._hash_token(raw_token), issued_at)
        user = await self._user_repo.save(user)

        logger.info("Password reset token issued for user: %s", user.pid)
        return PasswordResetIssued(
            user=user,
            token=raw_token,
            issued_at=issued_at,
            expires_at=issued_at + self._token_ttl,
        )

    async def reset_password(self, token: str, new_password: str) -> User:
        user = await self._user_repo.find_by_reset_token(self._hash_token(token))
        if user is None:
            raise InvalidResetTokenError

        if user.reset_token_expired(utc_now(), self._token_ttl):
            logger.debug("Expired reset token presented for user: %s", user.pid)
            raise InvalidResetTokenError

        # Hash first so a hashing failure leaves the token usable
        new_hash = self._password_service.hash(new_password)
        user.complete_password_reset(new_hash)
        user = await self._user_repo.save(user)

        logger.info("Password reset completed for user: %s", user.pid)
        return user
