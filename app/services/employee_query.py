"""
Employee query engine.

Every operation takes the store explicitly. Listing is a pure function of the
query and the store's candidate set:

1. keep records passing the search, role and active predicates,
2. sort them by name (stable, so equal names keep store order),
3. cut the requested page window and derive the paging metadata.

Search and role matching are case-sensitive.
"""

import math
from typing import Iterable, Optional

from app.core.exceptions import StoreError
from app.core.logging import get_logger
from app.models.employee import (
    DeleteOutcome,
    DeleteResult,
    Employee,
    EmployeeCreate,
    EmployeePage,
    EmployeePublic,
    EmployeeQuery,
    EmployeeUpdate,
)
from app.repositories.base import EmployeeStore

logger = get_logger(__name__)


def matches_search(employee: Employee, search: Optional[str]) -> bool:
    if not search:
        return True
    return search in employee.name or search in employee.role


def matches_role(employee: Employee, role: Optional[str]) -> bool:
    if not role:
        return True
    return employee.role == role


def matches_active(employee: Employee, include_inactive: bool) -> bool:
    return include_inactive or employee.is_active


def matches_query(employee: Employee, query: EmployeeQuery) -> bool:
    return (
        matches_search(employee, query.search)
        and matches_role(employee, query.filter_by_role)
        and matches_active(employee, query.include_inactive)
    )


def order_by_name(employees: Iterable[Employee]) -> list[Employee]:
    return sorted(employees, key=lambda employee: employee.name)


def paginate(employees: list[Employee], query: EmployeeQuery) -> EmployeePage:
    """Window an already filtered and ordered list and compute page metadata."""
    total = len(employees)
    page_number = query.page_number
    page_size = query.page_size

    if page_size > 0:
        total_pages = math.ceil(total / page_size)
        start = (page_number - 1) * page_size
        window = employees[start : start + page_size]
    else:
        total_pages = 1
        window = employees

    return EmployeePage(
        total_record_count=total,
        total_pages=total_pages,
        current_page=page_number,
        page_size=page_size,
        has_previous_page=page_number > 1,
        has_next_page=page_number < total_pages,
        data=[EmployeePublic.model_validate(employee) for employee in window],
    )


def list_employees(query: EmployeeQuery, store: EmployeeStore) -> EmployeePage:
    matching = order_by_name(e for e in store.enumerate() if matches_query(e, query))
    page = paginate(matching, query)
    logger.debug(
        f"Listed {len(page.data)} of {page.total_record_count} employee(s) "
        f"(page {page.current_page}/{page.total_pages})"
    )
    return page


def search_employees(search_text: str, store: EmployeeStore) -> list[Employee]:
    """Employees whose name or role contains search_text, active or not."""
    return order_by_name(e for e in store.enumerate() if matches_search(e, search_text))


def filter_employees(role: str, is_active: bool, store: EmployeeStore) -> list[Employee]:
    """Employees whose role contains ``role`` and whose active flag equals is_active."""
    return order_by_name(
        e for e in store.enumerate() if role in e.role and e.is_active == is_active
    )


def get_employee(employee_id: int, store: EmployeeStore) -> Optional[Employee]:
    return store.get(employee_id)


def create_employee(data: EmployeeCreate, store: EmployeeStore) -> Employee:
    return store.add(Employee(name=data.name, role=data.role, is_active=data.is_active))


def update_employee(data: EmployeeUpdate, store: EmployeeStore) -> Optional[Employee]:
    return store.update(
        Employee(id=data.id, name=data.name, role=data.role, is_active=data.is_active)
    )


def delete_employee(employee_id: int, store: EmployeeStore) -> DeleteResult:
    try:
        deleted = store.delete(employee_id)
    except StoreError as e:
        return DeleteResult(
            outcome=DeleteOutcome.STORE_ERROR, employee_id=employee_id, detail=str(e)
        )
    if not deleted:
        return DeleteResult(outcome=DeleteOutcome.NOT_FOUND, employee_id=employee_id)
    return DeleteResult(outcome=DeleteOutcome.DELETED, employee_id=employee_id)
