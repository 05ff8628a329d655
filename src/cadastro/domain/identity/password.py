"""Password value object. Holds only the encoded form, never the plaintext."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from .exceptions import InvalidPasswordError
from .rules import clean

MIN_LENGTH = 8
MAX_LENGTH = 20

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[\W_]", re.ASCII)  # underscore counts as a symbol


class PasswordEncoder(Protocol):
    def encode(self, plain: str) -> str: ...

    def verify(self, plain: str, encoded: str) -> bool: ...

    def needs_rehash(self, encoded: str) -> bool: ...


def sanitize(raw: str) -> str:
    # rstrip again: truncation can expose inner whitespace at the end
    return raw.strip()[:MAX_LENGTH].rstrip()


def validate(candidate: str) -> str | None:
    if len(candidate) < MIN_LENGTH:
        return f"Password must be at least {MIN_LENGTH} characters long"
    if len(candidate) > MAX_LENGTH:
        return f"Password must not exceed {MAX_LENGTH} characters"
    if not _LETTER.search(candidate):
        return "Password must contain at least one letter"
    if not _DIGIT.search(candidate):
        return "Password must contain at least one number"
    if not _SYMBOL.search(candidate):
        return "Password must contain at least one symbol"
    return None


@dataclass(frozen=True)
class Password:
    """Opaque wrapper for the encoded password.

    Construct from a raw password with ``Password(raw, encoder)``; rehydrate a
    stored encoding with ``Password.from_encoded``.
    """

    encoded: str = field(repr=False)

    def __init__(self, raw: str, encoder: PasswordEncoder) -> None:
        plain = clean(raw, sanitize=sanitize, validate=validate, error=InvalidPasswordError)
        object.__setattr__(self, "encoded", encoder.encode(plain))

    @classmethod
    def from_encoded(cls, encoded: str) -> Password:
        if not encoded:
            raise InvalidPasswordError("Encoded password must not be empty")
        instance = cls.__new__(cls)
        object.__setattr__(instance, "encoded", encoded)
        return instance

    @staticmethod
    def verify(plain: str, encoded: str, encoder: PasswordEncoder) -> bool:
        """Check ``plain`` against ``encoded``. Complexity rules are not re-applied.

        ``plain`` is sanitized first (trim, truncate to 20), so surrounding
        whitespace does not cause a mismatch.
        """
        return encoder.verify(sanitize(plain), encoded)

    def matches(self, plain: str, encoder: PasswordEncoder) -> bool:
        return Password.verify(plain, self.encoded, encoder)

    def needs_rehash(self, encoder: PasswordEncoder) -> bool:
        return encoder.needs_rehash(self.encoded)

    def __str__(self) -> str:
        return "********"
