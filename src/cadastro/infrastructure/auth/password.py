"""Argon2id password encoding using argon2-cffi."""
import logging
from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from cadastro.config import Settings, get_settings

logger = logging.getLogger(__name__)


class Argon2PasswordEncoder:
    """Salted one-way encoder. Each ``encode`` call yields a fresh salt."""

    def __init__(
        self,
        *,
        time_cost: int = 2,
        memory_cost: int = 65536,
        parallelism: int = 2,
        hash_len: int = 32,
        salt_len: int = 16,
    ) -> None:
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            hash_len=hash_len,
            salt_len=salt_len,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Argon2PasswordEncoder":
        return cls(
            time_cost=settings.password_hash_time_cost,
            memory_cost=settings.password_hash_memory_cost,
            parallelism=settings.password_hash_parallelism,
            hash_len=settings.password_hash_len,
            salt_len=settings.password_salt_len,
        )

    def encode(self, plain: str) -> str:
        return self._hasher.hash(plain)

    def verify(self, plain: str, encoded: str) -> bool:
        """Constant-time check of ``plain`` against a stored Argon2 string."""
        try:
            return self._hasher.verify(encoded, plain)
        except VerifyMismatchError:
            return False
        except InvalidHashError:
            logger.warning("Stored password encoding is not a valid Argon2 hash")
            return False
        except VerificationError:
            return False

    def needs_rehash(self, encoded: str) -> bool:
        """True if the encoding was created with outdated parameters."""
        try:
            return self._hasher.check_needs_rehash(encoded)
        except InvalidHashError:
            return True


@lru_cache
def get_password_encoder() -> Argon2PasswordEncoder:
    return Argon2PasswordEncoder.from_settings(get_settings())
