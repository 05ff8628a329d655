"""Validation errors raised when a value object cannot be constructed."""


class ValidationError(ValueError):
    field: str = "value"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidCPFError(ValidationError):
    field = "cpf"


class InvalidEmailError(ValidationError):
    field = "email"


class InvalidUsernameError(ValidationError):
    field = "username"


class InvalidPasswordError(ValidationError):
    field = "password"
