"""Identity use-case commands: register a profile, check a password, preview input."""
from __future__ import annotations

import logging
from collections.abc import Callable

from cadastro.domain.identity import cpf as cpf_rules
from cadastro.domain.identity import email as email_rules
from cadastro.domain.identity import username as username_rules
from cadastro.domain.identity.cpf import CPF
from cadastro.domain.identity.email import Email
from cadastro.domain.identity.entities import UserProfile
from cadastro.domain.identity.exceptions import ValidationError
from cadastro.domain.identity.password import Password, PasswordEncoder
from cadastro.domain.identity.username import Username
from cadastro.infrastructure.auth.password import get_password_encoder

logger = logging.getLogger(__name__)

_PREVIEWS: dict[str, Callable[[str], str]] = {
    "cpf": cpf_rules.mask,
    "email": email_rules.mask,
    "username": username_rules.mask,
}


class RegistrationError(Exception):
    """One or more fields were rejected. ``errors`` maps field name to message."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(f"{name}: {message}" for name, message in errors.items()))
        self.errors = errors


def register_profile(
    *,
    email: str,
    username: str,
    cpf: str,
    password: str,
    encoder: PasswordEncoder | None = None,
) -> UserProfile:
    """Build a UserProfile from raw form input, reporting every invalid field at once."""
    encoder = encoder or get_password_encoder()
    errors: dict[str, str] = {}
    values: dict[str, object] = {}
    builders: list[tuple[str, Callable[[], object]]] = [
        ("email", lambda: Email(email)),
        ("username", lambda: Username(username)),
        ("cpf", lambda: CPF(cpf)),
        ("password", lambda: Password(password, encoder)),
    ]
    for name, build in builders:
        try:
            values[name] = build()
        except ValidationError as exc:
            errors[exc.field] = exc.message

    if errors:
        logger.info("Registration rejected for fields: %s", ", ".join(errors))
        raise RegistrationError(errors)

    profile = UserProfile(**values)  # type: ignore[arg-type]
    logger.info(
        "Registered profile %s (username=%s, cpf=%s)",
        profile.id,
        profile.username,
        profile.cpf.redacted,
    )
    return profile


def check_password(
    profile: UserProfile,
    password: str,
    *,
    encoder: PasswordEncoder | None = None,
) -> bool:
    """True if ``password`` matches the profile's stored encoding."""
    encoder = encoder or get_password_encoder()
    if profile.password.matches(password, encoder):
        return True
    logger.info("Password mismatch for profile %s", profile.id)
    return False


def preview(field: str, raw: str) -> str:
    """Display-safe rendering of partial input for the given field."""
    return _PREVIEWS[field](raw)
