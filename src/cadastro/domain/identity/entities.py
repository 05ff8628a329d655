"""Domain entities for the Identity bounded context."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from .cpf import CPF
from .email import Email
from .password import Password
from .username import Username


@dataclass
class UserProfile:
    email: Email
    username: Username
    cpf: CPF
    password: Password
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
