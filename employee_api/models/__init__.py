"""
Pydantic models package.
"""
from employee_api.models.employee import EmployeeCreate, EmployeeUpdate, ApiResponse

__all__ = ["EmployeeCreate", "EmployeeUpdate", "ApiResponse"]
