"""Password hashing service using Argon2id.

Provides salted, memory-hard password hashing and constant-time verification.
"""

from argon2 import PasswordHasher
from argon2.exceptions import (
    HashingError,
    InvalidHashError,
    VerificationError,
    VerifyMismatchError,
)

from tasker_identity.exceptions import PasswordHashingError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses argon2-cffi's ``PasswordHasher`` (Argon2id). Digests are
    self-describing: algorithm, version, cost parameters and salt are encoded
    in the returned string.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> digest = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", digest)
    True
    >>> service.verify("wrong_password", digest)
    False
    """

    DEFAULT_TIME_COST = 3
    DEFAULT_MEMORY_COST = 65536  # KiB
    DEFAULT_PARALLELISM = 4

    def __init__(
        self,
        time_cost: int = DEFAULT_TIME_COST,
        memory_cost: int = DEFAULT_MEMORY_COST,
        parallelism: int = DEFAULT_PARALLELISM,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of Argon2 iterations.
        memory_cost
            Memory usage in KiB. Must be at least ``8 * parallelism``.
        parallelism
            Number of parallel lanes.
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The encoded Argon2 digest

        Raises
        ------
        PasswordHashingError
            If the underlying Argon2 computation fails
        """
        try:
            return self._hasher.hash(password)
        except HashingError as e:
            raise PasswordHashingError from e

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a digest.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The Argon2 digest to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        PasswordHashingError
            If the digest is malformed
        """
        try:
            return self._hasher.verify(password_hash, password)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as e:
            msg = "Stored password digest could not be verified"
            raise PasswordHashingError(msg) from e

    def needs_rehash(self, password_hash: str) -> bool:
        """Check whether a digest was produced with outdated cost parameters.

        Parameters
        ----------
        password_hash
            The existing digest to check

        Returns
        -------
        True if the digest should be regenerated on next login
        """
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError as e:
            msg = "Stored password digest is malformed"
            raise PasswordHashingError(msg) from e
