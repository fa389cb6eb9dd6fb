"""
Employee API endpoints.

Provides endpoints for:
- Paged listing with search, role and active-flag filters
- Plain search and role/active filter listings
- Employee CRUD by identifier

Store failures surface as 500 through the registered StoreError handler;
missing records are reported as 404.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import StoreDep
from app.core.constants import (
    ADD_SUCCESS_MESSAGE,
    COMMON_ERROR_MESSAGE,
    DELETE_SUCCESS_MESSAGE,
    NO_RECORD_ERROR_MESSAGE,
    UPDATE_SUCCESS_MESSAGE,
)
from app.core.logging import get_logger
from app.models.employee import (
    DeleteOutcome,
    EmployeeCreate,
    EmployeePage,
    EmployeePublic,
    EmployeeQuery,
    EmployeeUpdate,
    StatusResponse,
)
from app.services import employee_query

logger = get_logger(__name__)

router = APIRouter(
    prefix="/Employee",
    tags=["employees"],
    responses={404: {"description": "Employee not found"}},
)


@router.get("/GetAllEmployee", response_model=EmployeePage)
async def get_all_employees(
    store: StoreDep,
    page_number: Annotated[int, Query(alias="pageNumber", ge=1)] = 1,
    page_size: Annotated[int, Query(alias="pageSize", ge=0)] = 0,
    search: Optional[str] = None,
    filter_by_role: Annotated[Optional[str], Query(alias="filterByRole")] = None,
    include_inactive: Annotated[bool, Query(alias="includeInActive")] = False,
):
    """
    List employees ordered by name.

    pageSize=0 returns every match on a single page. Inactive employees are
    hidden unless includeInActive is true.
    """
    query = EmployeeQuery(
        page_number=page_number,
        page_size=page_size,
        search=search,
        filter_by_role=filter_by_role,
        include_inactive=include_inactive,
    )
    logger.info(
        f"Listing employees: page={page_number}, size={page_size}, "
        f"search={search!r}, role={filter_by_role!r}, include_inactive={include_inactive}"
    )
    page = employee_query.list_employees(query, store)
    logger.info(f"Retrieved {len(page.data)} of {page.total_record_count} employee(s)")
    return page


@router.get("/Search", response_model=list[EmployeePublic])
async def search_employees(
    store: StoreDep,
    search_text: Annotated[str, Query(alias="searchText")] = "",
):
    """Employees whose name or role contains searchText, active or not."""
    logger.info(f"Searching employees for {search_text!r}")
    employees = employee_query.search_employees(search_text, store)
    return [EmployeePublic.model_validate(emp) for emp in employees]


@router.get("/Filter", response_model=list[EmployeePublic])
async def filter_employees(
    store: StoreDep,
    role: str = "",
    is_active: Annotated[bool, Query(alias="isActive")] = True,
):
    """Employees whose role contains ``role`` and whose active flag equals isActive."""
    logger.info(f"Filtering employees: role={role!r}, is_active={is_active}")
    employees = employee_query.filter_employees(role, is_active, store)
    return [EmployeePublic.model_validate(emp) for emp in employees]


@router.post("/AddEmployee", response_model=StatusResponse)
async def add_employee(employee: EmployeeCreate, store: StoreDep):
    logger.info(f"Adding employee: {employee.name} ({employee.role})")
    db_employee = employee_query.create_employee(employee, store)
    logger.info(f"Employee added with ID: {db_employee.id}")
    return StatusResponse(status=True, status_message=ADD_SUCCESS_MESSAGE)


@router.put("/UpdateEmployee", response_model=StatusResponse)
async def update_employee(employee: EmployeeUpdate, store: StoreDep):
    """Replace name, role and active flag of an existing employee."""
    logger.info(f"Updating employee {employee.id}")
    updated = employee_query.update_employee(employee, store)
    if updated is None:
        logger.warning(f"Employee with ID {employee.id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NO_RECORD_ERROR_MESSAGE
        )
    logger.info(f"Employee {employee.id} updated successfully")
    return StatusResponse(status=True, status_message=UPDATE_SUCCESS_MESSAGE)


@router.get("/{employee_id}", response_model=EmployeePublic)
async def get_employee(employee_id: int, store: StoreDep):
    logger.info(f"Fetching employee: {employee_id}")
    employee = employee_query.get_employee(employee_id, store)
    if employee is None:
        logger.warning(f"Employee with ID {employee_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NO_RECORD_ERROR_MESSAGE
        )
    return EmployeePublic.model_validate(employee)


@router.delete("/{employee_id}", response_model=StatusResponse)
async def delete_employee(employee_id: int, store: StoreDep):
    logger.info(f"Deleting employee: {employee_id}")
    result = employee_query.delete_employee(employee_id, store)

    if result.outcome is DeleteOutcome.NOT_FOUND:
        logger.warning(f"Employee with ID {employee_id} not found")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=NO_RECORD_ERROR_MESSAGE
        )
    if result.outcome is DeleteOutcome.STORE_ERROR:
        logger.error(f"Failed to delete employee {employee_id}: {result.detail}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=COMMON_ERROR_MESSAGE,
        )

    logger.info(f"Employee {employee_id} deleted successfully")
    return StatusResponse(status=True, status_message=DELETE_SUCCESS_MESSAGE)
