"""
Employee repository.
Data access layer for employee operations.
"""
from typing import List, Dict, Any, Optional
import logging

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError, OperationFailure

from .base_repository import BaseRepository, CREATED_FIELD, UPDATED_FIELD, REVISION_FIELD
from employee_api.exceptions import DuplicateError

logger = logging.getLogger(__name__)

INDEX_KEY_SPECS_CONFLICT = 86

# Fields hidden from the list and detail views
LIST_PROJECTION = {UPDATED_FIELD: 0, REVISION_FIELD: 0}
DETAIL_PROJECTION = {CREATED_FIELD: 0, UPDATED_FIELD: 0, REVISION_FIELD: 0}


class EmployeeRepository(BaseRepository):
    """Repository for employee operations."""

    async def ensure_indexes(self) -> None:
        """
        Create the unique email index and the listing sort index.

        An existing index with a different specification is logged and kept.
        """
        for keys, options in (
            ([("email", ASCENDING)], {"unique": True, "name": "email_unique"}),
            ([(CREATED_FIELD, DESCENDING)], {"name": "created_desc"}),
        ):
            try:
                await self.collection.create_index(keys, **options)
            except OperationFailure as e:
                if e.code == INDEX_KEY_SPECS_CONFLICT:
                    logger.warning(f"⚠️ Index already exists with different options, skipped: {keys}")
                    continue
                raise
        logger.info(f"✅ Indexes ensured on {self.collection.name}")

    async def email_exists(self, email: str) -> bool:
        """True if an employee with this email is stored."""
        return await self.exists({"email": email})

    async def create_employee(self, employee_data: Dict[str, Any]) -> str:
        """
        Insert an employee.

        The unique index is the authoritative duplicate check: a concurrent
        insert with the same email surfaces here as DuplicateKeyError.

        Args:
            employee_data: Employee document without identifier or timestamps

        Returns:
            Created employee ID

        Raises:
            DuplicateError: If the email is already stored
        """
        try:
            return await self.create(employee_data)
        except DuplicateKeyError:
            logger.warning(f"Duplicate email rejected by unique index: {employee_data.get('email')}")
            raise DuplicateError("Employee", "email", employee_data.get("email"))

    async def list_employees(self) -> List[Dict[str, Any]]:
        """
        All employees, newest first, without update timestamp and revision.

        Returns:
            List of employee documents
        """
        return await self.find_all(
            projection=LIST_PROJECTION,
            sort=[(CREATED_FIELD, DESCENDING)]
        )

    async def get_public(self, employee_id: str) -> Optional[Dict[str, Any]]:
        """Employee without timestamps and revision, or None."""
        return await self.find_by_id(employee_id, projection=DETAIL_PROJECTION)

    async def replace_mutable_fields(
        self,
        employee_id: str,
        fields: Dict[str, Any]
    ) -> bool:
        """
        Overwrite the mutable fields of an employee.

        Args:
            employee_id: Employee ID
            fields: Merged name/email/position/phone values

        Returns:
            True if exactly one document matched
        """
        matched, modified = await self.update(employee_id, dict(fields))
        logger.debug(f"Update {employee_id}: matched={matched}, modified={modified}")
        return matched == 1
