from __future__ import annotations


class PersonValidationError(ValueError):
    """Raised when a person record setter rejects its input."""

    message: str = "invalid value"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidName(PersonValidationError):
    message = "invalid name"


class InvalidBirthdayYear(PersonValidationError):
    message = "invalid birthday year"


class InvalidEmail(PersonValidationError):
    message = "invalid email"


class InvalidPhone(PersonValidationError):
    message = "invalid phone"
