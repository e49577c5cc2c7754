"""Password hashing service using bcrypt.

Provides password hashing and verification with strength validation.
"""

import re
from functools import lru_cache

import bcrypt

from dinely_auth.exceptions import MalformedHashError, WeakPasswordError

# $2b$12$ followed by 22 chars of salt and 31 chars of digest
_BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}$")


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"dinely-dummy-password", bcrypt.gensalt(rounds=rounds))


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Hashing never validates strength; callers run ``validate_strength``
    on new passwords before hashing them.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    MIN_LENGTH = 8
    # bcrypt only looks at the first 72 bytes of input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use 4 to keep hashing fast.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string, embedding its salt and cost

        Raises
        ------
        WeakPasswordError
            If the password is longer than bcrypt can hash
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        MalformedHashError
            If the stored hash is not a bcrypt hash
        """
        if not _BCRYPT_HASH_PATTERN.match(password_hash or ""):
            raise MalformedHashError

        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            # Could never have been hashed by us
            return False

        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError as e:
            raise MalformedHashError from e

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum 8 characters
        - Maximum 72 bytes once UTF-8 encoded

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was produced with a different work factor.

        After changing the rounds setting, existing hashes can be
        identified for rehashing on next login.
        """
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True

    def verify_dummy(self, password: str) -> None:
        """Spend the cost of one ``verify`` without a stored hash.

        Login paths that reject a request before reaching a real hash call
        this so every rejection takes about as long as a wrong password.
        """
        encoded = password.encode("utf-8")[: self.MAX_BYTES]
        bcrypt.checkpw(encoded, _dummy_hash(self._rounds))
