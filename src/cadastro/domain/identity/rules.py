"""Sanitize -> validate -> construct pipeline shared by the identity value objects."""
from __future__ import annotations

from collections.abc import Callable

from .exceptions import ValidationError


def clean(
    raw: str,
    *,
    sanitize: Callable[[str], str],
    validate: Callable[[str], str | None],
    error: type[ValidationError],
) -> str:
    """Return the sanitized payload or raise ``error`` with the failing rule.

    ``validate`` returns ``None`` for an acceptable candidate, otherwise the
    message of the first rule that failed.
    """
    candidate = sanitize(raw)
    message = validate(candidate)
    if message is not None:
        raise error(message)
    return candidate
