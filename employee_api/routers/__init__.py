"""
API routers.
"""
from employee_api.routers import employees, health

__all__ = ["employees", "health"]
