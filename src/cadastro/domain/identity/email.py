"""Email address value object."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidEmailError
from .rules import clean

MAX_LENGTH = 254  # RFC 5321 path limit

_WHITESPACE = re.compile(r"\s")
_DISALLOWED = re.compile(r"[^a-z0-9@._+\-]")
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def sanitize(raw: str) -> str:
    """Strip whitespace, lowercase, collapse to a single ``@``, cap length, drop odd chars."""
    compact = _WHITESPACE.sub("", raw).lower()
    local, at, rest = compact.partition("@")
    single_at = local + at + rest.replace("@", "")
    return _DISALLOWED.sub("", single_at[:MAX_LENGTH])


def validate(candidate: str) -> str | None:
    if not candidate:
        return "Email must not be empty"
    if len(candidate) > MAX_LENGTH:
        return f"Email must not exceed {MAX_LENGTH} characters"
    if not _EMAIL_PATTERN.fullmatch(candidate):
        return "Invalid email address format"
    return None


def mask(raw: str) -> str:
    """Live-input preview; no structural validation."""
    return sanitize(raw)


@dataclass(frozen=True)
class Email:
    value: str

    def __init__(self, raw: str) -> None:
        address = clean(raw, sanitize=sanitize, validate=validate, error=InvalidEmailError)
        object.__setattr__(self, "value", address)

    @property
    def local_part(self) -> str:
        return self.value.partition("@")[0]

    @property
    def domain(self) -> str:
        return self.value.partition("@")[2]

    def __str__(self) -> str:
        return self.value
