"""
Field format validators.
Email, phone and document identifier checks shared by the employee service.
"""
import re
from typing import Any, Dict, Pattern

from bson import ObjectId
from email_validator import EmailNotValidError, validate_email

from employee_api.exceptions import ConfigurationError

# Mobile formats per region, applied after stripping spaces and hyphens
PHONE_PATTERNS: Dict[str, Pattern[str]] = {
    "IN": re.compile(r"^(?:\+91|91|0)?\d{10}$"),
}

_PHONE_SEPARATORS = re.compile(r"[\s\-]")


def is_valid_email(value: Any) -> bool:
    """
    Check email syntax with email-validator, the library behind pydantic's
    EmailStr. No DNS or deliverability lookup is performed.
    """
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_phone(value: Any, region: str = "IN") -> bool:
    """
    Check a phone number against the format of a region.

    Args:
        value: Phone number as submitted
        region: Region code (e.g. "IN")

    Returns:
        True if the number matches the region's format

    Raises:
        ConfigurationError: If no format is known for the region
    """
    pattern = PHONE_PATTERNS.get(region.upper())
    if pattern is None:
        raise ConfigurationError(
            f"No phone format configured for region '{region}'",
            details={"region": region, "supported": sorted(PHONE_PATTERNS)}
        )

    if not isinstance(value, str):
        return False

    return bool(pattern.match(_PHONE_SEPARATORS.sub("", value)))


def is_valid_object_id(value: Any) -> bool:
    """True if value is a well-formed MongoDB ObjectId."""
    return ObjectId.is_valid(value)
