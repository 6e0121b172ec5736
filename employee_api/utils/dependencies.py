"""
FastAPI dependencies for dependency injection.
Provides the database handle, repositories, services and the create-path
required-fields gate.
"""
from fastapi import Depends, Request
from typing import Optional

from employee_api.config import Settings
from employee_api.database import Database, Collections
from employee_api.exceptions import validate_required_fields
from employee_api.models.employee import EmployeeCreate
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService

REQUIRED_EMPLOYEE_FIELDS = ["name", "email", "position"]


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """Database handle opened by the application lifespan."""
    return request.app.state.database


async def get_employee_repository(
    database: Database = Depends(get_database)
) -> EmployeeRepository:
    """
    Employee repository bound to the employees collection.

    Raises:
        DatabaseError: If the database is not connected
    """
    return EmployeeRepository(database.get_db()[Collections.EMPLOYEES])


async def get_employee_service(
    employee_repo: EmployeeRepository = Depends(get_employee_repository),
    settings: Settings = Depends(get_app_settings)
) -> EmployeeService:
    """Get employee service with injected dependencies."""
    return EmployeeService(employee_repo, phone_region=settings.PHONE_REGION)


async def require_employee_fields(
    payload: Optional[EmployeeCreate] = None
) -> EmployeeCreate:
    """
    Gate in front of the create handler.

    Raises MissingFieldsError, which ends the request with the 200 failure
    envelope; the create handler never runs.

    Args:
        payload: Parsed request body, None when no body was sent

    Returns:
        The payload, with name, email and position present
    """
    data = payload.model_dump() if payload is not None else None
    validate_required_fields(data, REQUIRED_EMPLOYEE_FIELDS)
    return payload
