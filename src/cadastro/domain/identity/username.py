"""Username (public handle) value object."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidUsernameError
from .rules import clean

MIN_LENGTH = 3
MAX_LENGTH = 16

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_ALLOWED = re.compile(r"[a-z0-9]+")


def sanitize(raw: str) -> str:
    return _NON_ALNUM.sub("", raw.strip()).lower()[:MAX_LENGTH]


def validate(candidate: str) -> str | None:
    if len(candidate) < MIN_LENGTH:
        return f"Username must be at least {MIN_LENGTH} characters long"
    if len(candidate) > MAX_LENGTH:
        return f"Username must not exceed {MAX_LENGTH} characters"
    # unreachable after sanitize; kept as an invariant check
    if not _ALLOWED.fullmatch(candidate):
        return "Username can only contain letters and numbers"
    return None


def mask(raw: str) -> str:
    return sanitize(raw)


@dataclass(frozen=True)
class Username:
    value: str

    def __init__(self, raw: str) -> None:
        handle = clean(raw, sanitize=sanitize, validate=validate, error=InvalidUsernameError)
        object.__setattr__(self, "value", handle)

    def __str__(self) -> str:
        return self.value
