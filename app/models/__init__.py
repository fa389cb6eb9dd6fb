"""
Employee Records Service Models.

Exports all model classes for easy importing.
"""

from app.models.employee import (
    DeleteOutcome,
    DeleteResult,
    Employee,
    EmployeeCreate,
    EmployeePage,
    EmployeePublic,
    EmployeeQuery,
    EmployeeUpdate,
    StatusResponse,
)

__all__ = [
    # Database Model
    "Employee",
    # Request Schemas
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeQuery",
    # Response Schemas
    "EmployeePublic",
    "EmployeePage",
    "StatusResponse",
    # Results
    "DeleteOutcome",
    "DeleteResult",
]
