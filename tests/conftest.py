import pytest

from cadastro.config import get_settings
from cadastro.infrastructure.auth.password import Argon2PasswordEncoder, get_password_encoder


@pytest.fixture
def encoder() -> Argon2PasswordEncoder:
    """Minimum-cost Argon2 so tests do not pay the production hashing price."""
    return Argon2PasswordEncoder(time_cost=1, memory_cost=8, parallelism=1, hash_len=16, salt_len=8)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    get_password_encoder.cache_clear()
    yield
    get_settings.cache_clear()
    get_password_encoder.cache_clear()
