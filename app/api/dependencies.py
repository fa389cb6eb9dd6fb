from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from app.core.database import get_session
from app.repositories.base import EmployeeStore
from app.repositories.sql import SqlEmployeeStore

SessionDep = Annotated[Session, Depends(get_session)]


def get_employee_store(session: SessionDep) -> EmployeeStore:
    """Request-scoped store over the request's database session."""
    return SqlEmployeeStore(session)


StoreDep = Annotated[EmployeeStore, Depends(get_employee_store)]
