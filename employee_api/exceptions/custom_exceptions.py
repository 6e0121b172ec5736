"""
Custom exceptions for the application.
Provides specific exception types for different error scenarios.

Every exception carries the HTTP status code and the envelope ``data``
value it is reported with.
"""
from typing import Optional, Any, Dict, Iterable


class AppError(Exception):
    """Base application error."""
    
    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        data: Any = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.data = data
        super().__init__(self.message)


class ValidationError(AppError):
    """Validation error (400)."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class MissingFieldsError(AppError):
    """
    Required fields missing from a create request.
    
    Reported with 200 to keep the published contract of the create endpoint.
    """
    
    def __init__(self, missing: Iterable[str], required: Iterable[str]):
        missing = list(missing)
        message = f"{','.join(required)} fields are required"
        super().__init__(message, status_code=200, details={"missing_fields": missing})


class InvalidEmailError(AppError):
    """Malformed email address (409)."""
    
    def __init__(self, email: Any = None):
        super().__init__(
            "Entered Email Is Not Valid",
            status_code=409,
            details={"field": "email", "value": email}
        )


class InvalidPhoneError(ValidationError):
    """Phone number not matching the configured region (400)."""
    
    def __init__(self, phone: Any = None, region: Optional[str] = None):
        super().__init__(
            "Phone Number Is Not Valid",
            details={"field": "phone", "value": phone, "region": region}
        )


class MissingIdError(AppError):
    """Identifier absent from the request path (404)."""
    
    def __init__(self, resource: str = "Employee"):
        super().__init__(f"{resource} Id Not Found", status_code=404, details={"resource": resource})


class InvalidIdError(ValidationError):
    """Identifier is not a valid ObjectId (400)."""
    
    def __init__(self, identifier: Any, resource: str = "Employee"):
        super().__init__(
            f"Invalid {resource} ID",
            details={"resource": resource, "identifier": identifier}
        )


class NotFoundError(AppError):
    """Resource not found error (404)."""
    
    def __init__(self, resource: str = "Employee", identifier: Optional[str] = None):
        super().__init__(
            f"{resource} Not Found",
            status_code=404,
            details={"resource": resource, "identifier": identifier}
        )


class DuplicateError(ValidationError):
    """Duplicate resource error (400)."""
    
    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(
            f"{resource} Already Exists",
            details={"resource": resource, "field": field, "value": value}
        )


class EmptyResultError(AppError):
    """Listing found no documents (400, data is an empty list)."""
    
    def __init__(self, resource: str = "Employees"):
        super().__init__(
            f"No {resource} Found",
            status_code=400,
            details={"resource": resource},
            data=[]
        )


class DatabaseError(AppError):
    """Database operation error (500)."""
    
    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class ConfigurationError(AppError):
    """Configuration/setup error (500)."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


# Validation helpers
def validate_required_fields(data: Optional[Dict[str, Any]], required_fields: list[str]) -> None:
    """
    Validate that all required fields are present and truthy in data.
    
    Args:
        data: Data dictionary to validate (None counts as empty)
        required_fields: List of required field names
        
    Raises:
        MissingFieldsError: If any required field is missing or empty
    """
    data = data or {}
    missing = [field for field in required_fields if not data.get(field)]
    if missing:
        raise MissingFieldsError(missing, required_fields)
