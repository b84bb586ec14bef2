from .errors import (
    InvalidBirthdayYear,
    InvalidEmail,
    InvalidName,
    InvalidPhone,
    PersonValidationError,
)
from .phone_input import NumericForm, PhoneInput, StringForm, phone_input_from
from .person_record import PersonRecord

__all__ = [
    "PersonRecord",
    "PersonValidationError",
    "InvalidName",
    "InvalidBirthdayYear",
    "InvalidEmail",
    "InvalidPhone",
    "PhoneInput",
    "StringForm",
    "NumericForm",
    "phone_input_from",
]
