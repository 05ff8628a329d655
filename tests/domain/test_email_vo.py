import dataclasses

import pytest

from cadastro.domain.identity import email
from cadastro.domain.identity.email import Email
from cadastro.domain.identity.exceptions import InvalidEmailError


def test_email_trimmed_and_lowercased():
    address = Email("  User@Example.COM  ")
    assert address.value == "user@example.com"
    assert address.domain == "example.com"
    assert address.local_part == "user"


def test_email_internal_whitespace_removed():
    assert Email("jo hn@exa mple.com").value == "john@example.com"


def test_email_extra_at_signs_collapsed():
    assert email.sanitize("a@b@c.com") == "a@bc.com"
    assert Email("a@b@c.com").domain == "bc.com"


def test_email_disallowed_characters_dropped():
    assert email.sanitize("jo!hn#@ex(a)mple.com") == "john@example.com"
    assert email.sanitize("first.last+tag_x-y@mail.co") == "first.last+tag_x-y@mail.co"


def test_email_truncated_to_max_length():
    raw = "a" * 300 + "@example.com"
    assert len(email.sanitize(raw)) == email.MAX_LENGTH


def test_email_empty_rejected():
    with pytest.raises(InvalidEmailError, match="Email must not be empty"):
        Email("   ")


@pytest.mark.parametrize("raw", ["user", "user@example", "@example.com", "user@.", "user@example."])
def test_email_bad_format_rejected(raw):
    with pytest.raises(InvalidEmailError, match="Invalid email address format"):
        Email(raw)


def test_validate_rejects_overlong_candidate():
    assert email.validate("a" * 250 + "@x.com") == "Email must not exceed 254 characters"


def test_error_field_name():
    with pytest.raises(InvalidEmailError) as info:
        Email("nope")
    assert info.value.field == "email"


def test_mask_does_not_validate():
    assert email.mask(" Jo") == "jo"
    assert email.mask("Jo@Exa") == "jo@exa"


@pytest.mark.parametrize("raw", ["", "  A@B@C.Com ", "x" * 400, "ü@ß.de", "a @ b . c"])
def test_sanitize_idempotent(raw):
    once = email.sanitize(raw)
    assert email.sanitize(once) == once


def test_email_immutable_and_equal_by_value():
    a = Email("user@example.com")
    assert a == Email("USER@example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.value = "x@y.z"  # type: ignore[misc]
