"""
Employee models.
Request bodies and the uniform response envelope.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Optional


class EmployeeCreate(BaseModel):
    """
    Employee creation request.

    Presence of name, email and position is enforced by the required-fields
    gate, and email/phone formats by the service, so every field is optional
    here.
    """

    name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Email address, unique across employees")
    position: Optional[str] = Field(None, description="Job position")
    age: Optional[int] = Field(None, ge=0, description="Age in years")
    phone: Optional[str] = Field(None, description="Mobile number in the configured region's format")

    model_config = ConfigDict(extra="ignore")


class EmployeeUpdate(BaseModel):
    """
    Employee update request.

    Falsy values fall back to the stored ones; email is never updatable.
    """

    name: Optional[str] = None
    position: Optional[str] = None
    phone: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class ApiResponse(BaseModel):
    """Response envelope shared by every endpoint."""

    status: bool
    message: str
    data: Any = None
