"""
Employee API - CRUD endpoints for employee records.

Domain errors are raised as-is and translated to HTTP responses by the
exception handlers registered in app/main.py.
"""
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional
import logging

from app.application.employee_service import EmployeeService
from app.db.connection import Database, get_database
from app.domain.entities import Employee
from app.domain.unit_of_work import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)

router = APIRouter()

employee_service = EmployeeService()


# ============================================
# Pydantic Models
# ============================================

class CreateEmployeeRequest(BaseModel):
    """Request to create a new employee"""
    name: str = Field(..., description="Full name (2-100 characters)")
    job_role: str = Field(..., description="Job role (2-50 characters)")
    salary: Decimal = Field(..., description="Positive amount with at most 2 decimal places")
    employee_registration: int = Field(..., description="Unique 6-digit registration number")


class UpdateEmployeeRequest(BaseModel):
    """
    Partial update - only supplied fields change.

    employee_registration is accepted by the schema only so the domain can
    reject it with a clear message (registration is immutable).
    """
    name: Optional[str] = None
    job_role: Optional[str] = None
    salary: Optional[Decimal] = None
    employee_registration: Optional[int] = None

    class Config:
        extra = "forbid"


class SalaryIncreaseRequest(BaseModel):
    """Request to raise salary by a percentage"""
    percentage: Decimal = Field(..., description="Increase in percent, 0 < p <= 100")


class EmployeeResponse(BaseModel):
    """Employee details response"""
    id: str
    name: str
    job_role: str
    salary: float
    employee_registration: int
    created_at: datetime
    updated_at: datetime


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(**employee.to_dict())


def get_unit_of_work(database: Database = Depends(get_database)) -> SQLAlchemyUnitOfWork:
    """Fresh Unit of Work per request"""
    return SQLAlchemyUnitOfWork(database.session_maker)


# ============================================
# Endpoints
# ============================================

@router.get("/employees", response_model=list[EmployeeResponse])
async def list_employees(uow: SQLAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """List all employees (oldest first)"""
    async with uow:
        employees = await employee_service.list_employees(uow)

    logger.info(f"Listing {len(employees)} employees")
    return [_to_response(employee) for employee in employees]


@router.get("/employees/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    uow: SQLAlchemyUnitOfWork = Depends(get_unit_of_work)
):
    """
    Get a single employee.

    Raises:
        404 if employee not found
    """
    async with uow:
        employee = await employee_service.get_employee(uow, employee_id)
    return _to_response(employee)


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: CreateEmployeeRequest,
    uow: SQLAlchemyUnitOfWork = Depends(get_unit_of_work)
):
    """
    Create a new employee.

    Raises:
        400 if a field violates a business rule
        409 if employee_registration is already taken
    """
    logger.info(f"Creating employee with registration {request.employee_registration}")

    async with uow:
        employee = await employee_service.create_employee(uow, request.model_dump())

    logger.info(f"✅ Employee created: {employee.id}")
    return _to_response(employee)


@router.put("/employees/{employee_id}", response_model=EmployeeResponse)
@router.patch("/employees/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    request: UpdateEmployeeRequest,
    uow: SQLAlchemyUnitOfWork = Depends(get_unit_of_work)
):
    """
    Update name, job role and/or salary.

    Raises:
        400 if a field is invalid or employee_registration is supplied
        404 if employee not found
    """
    changes = request.model_dump(exclude_unset=True)

    async with uow:
        employee = await employee_service.update_employee(uow, employee_id, changes)
    return _to_response(employee)


@router.post("/employees/{employee_id}/salary-increase", response_model=EmployeeResponse)
async def give_salary_increase(
    employee_id: str,
    request: SalaryIncreaseRequest,
    uow: SQLAlchemyUnitOfWork = Depends(get_unit_of_work)
):
    """
    Raise salary by a percentage.

    Raises:
        400 if percentage is not in (0, 100]
        404 if employee not found
    """
    async with uow:
        employee = await employee_service.give_salary_increase(
            uow, employee_id, request.percentage
        )
    return _to_response(employee)


@router.delete("/employees/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    uow: SQLAlchemyUnitOfWork = Depends(get_unit_of_work)
):
    """
    Delete an employee.

    Raises:
        404 if employee not found
    """
    async with uow:
        await employee_service.delete_employee(uow, employee_id)

    logger.info(f"Employee {employee_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
