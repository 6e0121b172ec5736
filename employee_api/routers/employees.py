"""
Employees router.
API endpoints for employee CRUD, mounted under the configured API prefix.
"""
from fastapi import APIRouter, Depends, Path, status
from typing import Optional
from fastapi.responses import JSONResponse

from employee_api.models.employee import ApiResponse, EmployeeCreate, EmployeeUpdate
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.dependencies import get_employee_service, require_employee_fields
from employee_api.utils.responses import envelope

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create employee",
    description="Create a new employee record"
)
async def create_employee(
    employee_data: EmployeeCreate = Depends(require_employee_fields),
    service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    """
    Create a new employee.

    **Request Body:**
    - **name**: Full name (required)
    - **email**: Email address, unique (required)
    - **position**: Job position (required)
    - **age**: Optional age
    - **phone**: Optional mobile number

    **Raises:**
    - 200: If name, email or position is missing
    - 409: If email is malformed
    - 400: If phone is malformed or the employee already exists
    """
    await service.create_employee(employee_data)

    return envelope(status.HTTP_201_CREATED, "Employee added successfully", success=True)


@router.get(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="List employees",
    description="Get all employees, newest first"
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    """
    List employees.

    **Raises:**
    - 400: If no employee exists
    """
    employees = await service.list_employees()

    return envelope(
        status.HTTP_201_CREATED,
        "Employee Data Fetched Successfully",
        employees,
        success=True
    )


@router.get(
    "/{employee_id}",
    response_model=ApiResponse,
    summary="Get employee",
    description="Get employee by ID"
)
async def get_employee(
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    """
    Get employee by ID.

    **Raises:**
    - 400: If the ID is malformed
    - 404: If the ID is missing or the employee not found
    """
    employee = await service.get_employee(employee_id)

    return envelope(status.HTTP_200_OK, "Employee Data Fetched Successfully", employee, success=True)


@router.patch(
    "/{employee_id}",
    response_model=ApiResponse,
    summary="Update employee",
    description="Update name, position and phone of an employee"
)
async def update_employee(
    employee_id: str = Path(..., description="Employee ID"),
    update_data: Optional[EmployeeUpdate] = None,
    service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    """
    Update employee.

    Omitted or empty fields keep their stored values; email cannot change.

    **Request Body:** (all optional)
    - **name**: Full name
    - **position**: Job position
    - **phone**: Mobile number

    **Raises:**
    - 400: If the ID or phone is malformed
    - 404: If the ID is missing or the employee not found
    """
    await service.update_employee(employee_id, update_data or EmployeeUpdate())

    return envelope(status.HTTP_200_OK, "Employee Data Updated Successfully", success=True)


@router.delete(
    "/{employee_id}",
    response_model=ApiResponse,
    summary="Delete employee",
    description="Permanently delete an employee"
)
async def delete_employee(
    employee_id: str = Path(..., description="Employee ID"),
    service: EmployeeService = Depends(get_employee_service)
) -> JSONResponse:
    """
    Delete employee.

    **Raises:**
    - 400: If the ID is malformed
    - 404: If the ID is missing or the employee not found
    """
    await service.delete_employee(employee_id)

    return envelope(status.HTTP_200_OK, "Employee Deleted Successfully", success=True)
