"""
Employee service.
Business logic for creating, listing, reading, updating and deleting employees.
"""
from typing import List, Dict, Any, Optional
import logging

from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.exceptions import (
    NotFoundError,
    DuplicateError,
    EmptyResultError,
    InvalidEmailError,
    InvalidPhoneError,
    InvalidIdError,
    MissingIdError
)
from employee_api.models.employee import EmployeeCreate, EmployeeUpdate
from employee_api.utils.validators import is_valid_email, is_valid_phone, is_valid_object_id

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("name", "position", "phone")


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, employee_repo: EmployeeRepository, phone_region: str = "IN"):
        """
        Initialize employee service.

        Args:
            employee_repo: Employee repository instance
            phone_region: Region whose phone format is enforced
        """
        self.employee_repo = employee_repo
        self.phone_region = phone_region

    def _check_phone(self, phone: Optional[str]) -> None:
        # Only a supplied phone is checked; absent or empty phones pass
        if phone and not is_valid_phone(phone, self.phone_region):
            raise InvalidPhoneError(phone, self.phone_region)

    @staticmethod
    def _require_id(employee_id: Optional[str]) -> str:
        if not employee_id or not employee_id.strip():
            raise MissingIdError()
        return employee_id

    @staticmethod
    def _require_object_id(employee_id: str) -> None:
        if not is_valid_object_id(employee_id):
            raise InvalidIdError(employee_id)

    async def create_employee(self, employee_data: EmployeeCreate) -> str:
        """
        Create a new employee.

        Checks run in order: email format, phone format, email uniqueness.

        Args:
            employee_data: Employee creation data (required fields already present)

        Returns:
            Created employee ID

        Raises:
            InvalidEmailError: If email is malformed
            InvalidPhoneError: If a supplied phone is malformed
            DuplicateError: If the email already exists
        """
        if not is_valid_email(employee_data.email):
            raise InvalidEmailError(employee_data.email)

        self._check_phone(employee_data.phone)

        if await self.employee_repo.email_exists(employee_data.email):
            raise DuplicateError("Employee", "email", employee_data.email)

        employee_doc = employee_data.model_dump(exclude_none=True)
        employee_id = await self.employee_repo.create_employee(employee_doc)

        logger.info(f"✅ Employee created: {employee_id}")

        return employee_id

    async def list_employees(self) -> List[Dict[str, Any]]:
        """
        List all employees, newest first.

        Raises:
            EmptyResultError: If no employee is stored
        """
        employees = await self.employee_repo.list_employees()

        if not employees:
            raise EmptyResultError("Employees")

        return employees

    async def get_employee(self, employee_id: Optional[str]) -> Dict[str, Any]:
        """
        Get employee by ID, without timestamps and revision.

        Args:
            employee_id: Employee ID from the request path

        Returns:
            Employee document

        Raises:
            MissingIdError: If the ID is blank
            InvalidIdError: If the ID is not an ObjectId
            NotFoundError: If employee not found
        """
        employee_id = self._require_id(employee_id)
        self._require_object_id(employee_id)

        employee = await self.employee_repo.get_public(employee_id)

        if not employee:
            raise NotFoundError("Employee", employee_id)

        return employee

    async def update_employee(
        self,
        employee_id: Optional[str],
        update_data: EmployeeUpdate
    ) -> None:
        """
        Update an employee's name, position and phone.

        Falsy values are replaced by the stored ones; email is always carried
        over from the stored record.

        Args:
            employee_id: Employee ID from the request path
            update_data: Update data

        Raises:
            MissingIdError: If the ID is blank
            InvalidPhoneError: If a supplied phone is malformed
            InvalidIdError: If the ID is not an ObjectId
            NotFoundError: If employee not found
        """
        employee_id = self._require_id(employee_id)
        self._check_phone(update_data.phone)
        self._require_object_id(employee_id)

        logger.info(f"Updating employee: {employee_id}")

        employee = await self.employee_repo.find_by_id(employee_id)

        if not employee:
            raise NotFoundError("Employee", employee_id)

        submitted = update_data.model_dump()
        merged = {
            field: submitted.get(field) or employee.get(field)
            for field in MUTABLE_FIELDS
        }
        merged = {field: value for field, value in merged.items() if value is not None}
        merged["email"] = employee["email"]

        if not await self.employee_repo.replace_mutable_fields(employee_id, merged):
            # Removed between the lookup and the write
            raise NotFoundError("Employee", employee_id)

        logger.info(f"✅ Employee updated: {employee_id}")

    async def delete_employee(self, employee_id: Optional[str]) -> None:
        """
        Hard delete an employee.

        Args:
            employee_id: Employee ID from the request path

        Raises:
            MissingIdError: If the ID is blank
            InvalidIdError: If the ID is not an ObjectId
            NotFoundError: If employee not found
        """
        employee_id = self._require_id(employee_id)
        self._require_object_id(employee_id)

        logger.warning(f"Deleting employee: {employee_id}")

        if not await self.employee_repo.find_by_id(employee_id):
            raise NotFoundError("Employee", employee_id)

        deleted = await self.employee_repo.delete(employee_id)

        if deleted != 1:
            raise NotFoundError("Employee", employee_id)

        logger.info(f"🗑️ Employee deleted: {employee_id}")
