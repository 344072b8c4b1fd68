"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from tasker.domain.shared.time import ensure_tz_aware, utc_now
from tasker_identity.exceptions import InvalidTokenError
from tasker_identity.schemas import TokenPayload

logger = logging.getLogger(__name__)


class JWTService:
    """Service for JWT access token creation and verification.

    Tokens are stateless: they carry the user's public identifier in ``sub``
    and stay valid until ``exp`` passes. There is no revocation list.

    Examples
    --------
    >>> service = JWTService(secret_key=b"0" * 32)
    >>> token = service.create_access_token(user_pid)
    >>> payload = service.verify_token(token)
    >>> print(payload.user_pid)
    """

    DEFAULT_ACCESS_EXPIRE_SECONDS = 3600
    MIN_SECRET_BYTES = 32
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: bytes,
        access_token_expire_seconds: int = DEFAULT_ACCESS_EXPIRE_SECONDS,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Raw HMAC key for signing tokens. Must be at least 32 bytes.
        access_token_expire_seconds
            Seconds until an access token expires (default 3600)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if len(secret_key) < self.MIN_SECRET_BYTES:
            msg = f"JWT secret key must be at least {self.MIN_SECRET_BYTES} bytes"
            raise ValueError(msg)
        if access_token_expire_seconds <= 0:
            msg = "Access token lifetime must be positive"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(seconds=access_token_expire_seconds)

    @property
    def access_token_expire_seconds(self) -> int:
        return int(self._access_expire.total_seconds())

    def create_access_token(
        self,
        user_pid: UUID,
        now: datetime | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_pid
            The user's stable public identifier
        now
            Issuance time (defaults to the wall clock)

        Returns
        -------
        The encoded JWT token string
        """
        issued_at = ensure_tz_aware(now) if now else utc_now()
        expires_at = issued_at + self._access_expire

        payload = {
            "sub": str(user_pid),
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str, now: datetime | None = None) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify
        now
            Verification time (defaults to the wall clock)

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or malformed. The message is the
            same for every cause.
        """
        current = ensure_tz_aware(now) if now else utc_now()

        try:
            # Expiry is checked below against ``current`` so callers can
            # verify at an explicit point in time.
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "iat", "exp"],
                },
            )
            token_payload = TokenPayload(
                user_pid=UUID(payload["sub"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError from e
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.debug("Rejected token with malformed payload: %s", e)
            raise InvalidTokenError from e

        if token_payload.is_expired(current):
            logger.debug("Rejected expired token for subject %s", token_payload.user_pid)
            raise InvalidTokenError

        return token_payload
