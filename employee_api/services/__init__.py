"""
Service layer.
"""
from employee_api.services.employee_service import EmployeeService

__all__ = ["EmployeeService"]
