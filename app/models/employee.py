"""
Employee database model and API schemas for the Employee Records Service.

API schemas serialize with camelCase keys (``isActive``, ``totalRecordCount``)
while Python code keeps snake_case attribute names.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


class ApiSchema(BaseModel):
    """Base for request/response schemas exchanged with API clients."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Database Models


class Employee(SQLModel, table=True):
    """ORM model for the employees table."""

    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, min_length=1, index=True)
    role: str = Field(max_length=100, min_length=1)
    is_active: bool = Field(default=True)


# Request Schemas


class EmployeeCreate(ApiSchema):
    """Input schema for adding a new employee."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = PydanticField(min_length=1, max_length=255)
    role: str = PydanticField(min_length=1, max_length=100)
    is_active: bool


class EmployeeUpdate(EmployeeCreate):
    """Input schema for replacing an existing employee's fields."""

    id: int


class EmployeeQuery(ApiSchema):
    """
    Filter and paging parameters for listing employees.

    A page_size of 0 disables pagination and returns every match.
    """

    page_number: int = PydanticField(default=1, ge=1)
    page_size: int = PydanticField(default=0, ge=0)
    search: Optional[str] = None
    filter_by_role: Optional[str] = None
    include_inactive: bool = False


# Response Schemas


class EmployeePublic(ApiSchema):
    """Output schema for a single employee."""

    id: int
    name: str
    role: str
    is_active: bool


class EmployeePage(ApiSchema):
    """One window of a filtered, name-ordered employee listing."""

    total_record_count: int
    total_pages: int
    current_page: int
    page_size: int
    has_previous_page: bool
    has_next_page: bool
    data: list[EmployeePublic]


class StatusResponse(ApiSchema):
    """Acknowledgement returned by mutating endpoints."""

    status: bool
    status_message: str


class DeleteOutcome(str, Enum):
    """Result kinds of a delete request."""

    DELETED = "deleted"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"


class DeleteResult(BaseModel):
    """Tagged result of deleting an employee; detail is set for store errors."""

    outcome: DeleteOutcome
    employee_id: int
    detail: Optional[str] = None

    @property
    def deleted(self) -> bool:
        return self.outcome is DeleteOutcome.DELETED
