"""CPF (Cadastro de Pessoas Fisicas) value object and check-digit algorithm."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .exceptions import InvalidCPFError
from .rules import clean

LENGTH = 11

_NON_DIGIT = re.compile(r"[^0-9]")
_ALL_DIGITS = re.compile(r"[0-9]{11}")


def sanitize(raw: str) -> str:
    """Drop every non-digit and keep at most the first 11 digits."""
    return _NON_DIGIT.sub("", raw)[:LENGTH]


def check_digit(digits: str, length: int) -> int:
    """Check digit over the first ``length`` digits (9 for the 10th, 10 for the 11th)."""
    total = sum(int(d) * (length + 1 - i) for i, d in enumerate(digits[:length]))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def compute_check_digits(prefix: str) -> str:
    """Both check digits for a 9-digit prefix."""
    if not re.fullmatch(r"[0-9]{9}", prefix):
        raise ValueError(f"CPF prefix must be 9 digits, got {prefix!r}")
    first = check_digit(prefix, 9)
    second = check_digit(prefix + str(first), 10)
    return f"{first}{second}"


def validate(candidate: str) -> str | None:
    if len(candidate) != LENGTH:
        return "CPF must have 11 digits"
    if not _ALL_DIGITS.fullmatch(candidate):
        return "CPF must contain only numbers"
    if len(set(candidate)) == 1:
        return "CPF cannot be a sequence of the same digit"
    if (
        check_digit(candidate, 9) != int(candidate[9])
        or check_digit(candidate, 10) != int(candidate[10])
    ):
        return "Invalid CPF check digits"
    return None


def mask(raw: str) -> str:
    """Progressive ``000.000.000-00`` punctuation for partial input. Never fails."""
    digits = sanitize(raw)
    head = ".".join(group for group in (digits[:3], digits[3:6], digits[6:9]) if group)
    tail = digits[9:]
    return f"{head}-{tail}" if tail else head


@dataclass(frozen=True)
class CPF:
    """Immutable CPF. ``repr``/``str`` only ever show the redacted form."""

    value: str  # always 11 digits, no punctuation

    def __init__(self, raw: str) -> None:
        digits = clean(raw, sanitize=sanitize, validate=validate, error=InvalidCPFError)
        object.__setattr__(self, "value", digits)

    def format(self) -> str:
        """XXX.XXX.XXX-YY"""
        d = self.value
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    @property
    def redacted(self) -> str:
        """***.XXX.XXX-** -- safe for logs."""
        d = self.value
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __repr__(self) -> str:
        return f"CPF({self.redacted!r})"

    def __str__(self) -> str:
        return self.redacted
