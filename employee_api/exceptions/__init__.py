"""
Custom exceptions package.
"""
from employee_api.exceptions.custom_exceptions import (
    AppError,
    ValidationError,
    MissingFieldsError,
    InvalidEmailError,
    InvalidPhoneError,
    MissingIdError,
    InvalidIdError,
    NotFoundError,
    DuplicateError,
    EmptyResultError,
    DatabaseError,
    ConfigurationError,
    validate_required_fields
)

__all__ = [
    "AppError",
    "ValidationError",
    "MissingFieldsError",
    "InvalidEmailError",
    "InvalidPhoneError",
    "MissingIdError",
    "InvalidIdError",
    "NotFoundError",
    "DuplicateError",
    "EmptyResultError",
    "DatabaseError",
    "ConfigurationError",
    "validate_required_fields"
]
