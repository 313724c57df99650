"""
Employee Controller
Handles HTTP requests for the employee API endpoints.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from employee_registry.config.settings import IMPORT_DEFAULT_COUNT
from employee_registry.models.errors import NotFoundError, ValidationError
from employee_registry.models.request_models import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
    MessageResponse,
)
from employee_registry.repositories.employee_repository import EmployeeRegistry
from employee_registry.services.import_service import ImportSource, import_employees

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/employees", tags=["employees"])


def get_registry(request: Request) -> EmployeeRegistry:
    """The registry owned by the running application."""
    return request.app.state.registry


def get_import_source(request: Request) -> ImportSource:
    return request.app.state.import_source


@router.get("", response_model=EmployeeListResponse, response_model_exclude_none=True)
def list_employees(registry: EmployeeRegistry = Depends(get_registry)):
    """List all employees in insertion order."""
    employees = registry.list()
    return {"data": [e.to_dict() for e in employees], "count": len(employees)}


@router.get("/search", response_model=EmployeeListResponse, response_model_exclude_none=True)
def search_employees(
    name: Optional[str] = Query(None),
    registry: EmployeeRegistry = Depends(get_registry),
):
    """
    Search employees by name (case-insensitive substring match).
    """
    employees = registry.find_by_name(name or "")
    return {"data": [e.to_dict() for e in employees], "count": len(employees)}


@router.get(
    "/import",
    status_code=201,
    response_model=EmployeeListResponse,
    response_model_exclude_none=True,
)
def import_from_api(
    count: int = Query(IMPORT_DEFAULT_COUNT),
    registry: EmployeeRegistry = Depends(get_registry),
    source: ImportSource = Depends(get_import_source),
):
    """
    Import employees from the external Random User API.
    Each imported employee gets a random salary.
    """
    added = import_employees(registry, source, count)
    return {
        "message": f"{len(added)} employees imported successfully",
        "data": [e.to_dict() for e in added],
        "count": len(added),
    }


@router.get("/{employee_id}", response_model=EmployeeResponse, response_model_exclude_none=True)
def get_employee(employee_id: str, registry: EmployeeRegistry = Depends(get_registry)):
    employee = registry.find_by_id(employee_id)
    if employee is None:
        raise NotFoundError(f"No employee found with id: {employee_id}", employee_id)
    return {"data": employee.to_dict()}


@router.post("", status_code=201, response_model=EmployeeResponse, response_model_exclude_none=True)
def create_employee(payload: EmployeeCreate, registry: EmployeeRegistry = Depends(get_registry)):
    """
    Create a new employee. name, age and salary are required.
    """
    if payload.name is None or payload.age is None or payload.salary is None:
        raise ValidationError("name, age and salary are required")

    employee = registry.add(
        payload.name,
        payload.age,
        payload.salary,
        payload.email,
        payload.phone,
        payload.photoUrl,
    )
    logger.info(f"[API] Created employee {employee.id}")
    return {"message": "Employee created successfully", "data": employee.to_dict()}


@router.put("/{employee_id}", response_model=EmployeeResponse, response_model_exclude_none=True)
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    registry: EmployeeRegistry = Depends(get_registry),
):
    """
    Update the fields sent in the body. Fields are applied in order and a
    validation failure keeps the fields applied before it.
    """
    employee = registry.update_by_id(employee_id, payload.model_dump(exclude_unset=True))
    if employee is None:
        raise NotFoundError(f"No employee found with id: {employee_id}", employee_id)
    return {"message": "Employee updated successfully", "data": employee.to_dict()}


@router.delete("/{employee_id}", response_model=MessageResponse)
def delete_employee(employee_id: str, registry: EmployeeRegistry = Depends(get_registry)):
    if not registry.delete_by_id(employee_id):
        raise NotFoundError(f"No employee found with id: {employee_id}", employee_id)
    return {"message": "Employee deleted successfully"}


@router.delete("", response_model=MessageResponse)
def delete_employees_by_name(
    name: Optional[str] = Query(None),
    registry: EmployeeRegistry = Depends(get_registry),
):
    """
    Delete EVERY employee whose name contains ``name`` (case-insensitive).
    This is a bulk operation, not an exact-match delete.
    """
    if not registry.delete_by_name(name or ""):
        raise NotFoundError(f"No employee found with name: {name}")
    return {"message": "Employee(s) deleted successfully"}
