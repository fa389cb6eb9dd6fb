from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.exceptions import StoreError
from app.core.logging import get_logger
from app.models.employee import Employee

logger = get_logger(__name__)


class SqlEmployeeStore:
    """EmployeeStore backed by a SQLModel session (one per request)."""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Employee store {operation} error: {e}")
            raise StoreError(operation, str(e)) from e

    def add(self, employee: Employee) -> Employee:
        employee.id = None
        with self._guard("add"):
            self.session.add(employee)
            self.session.commit()
            self.session.refresh(employee)
        return employee

    def get(self, employee_id: int) -> Optional[Employee]:
        with self._guard("get"):
            return self.session.get(Employee, employee_id)

    def update(self, employee: Employee) -> Optional[Employee]:
        with self._guard("update"):
            db_employee = self.session.get(Employee, employee.id)
            if db_employee is None:
                return None
            db_employee.name = employee.name
            db_employee.role = employee.role
            db_employee.is_active = employee.is_active
            self.session.add(db_employee)
            self.session.commit()
            self.session.refresh(db_employee)
        return db_employee

    def delete(self, employee_id: int) -> bool:
        with self._guard("delete"):
            db_employee = self.session.get(Employee, employee_id)
            if db_employee is None:
                return False
            self.session.delete(db_employee)
            self.session.commit()
        return True

    def enumerate(self) -> list[Employee]:
        with self._guard("enumerate"):
            return list(self.session.exec(select(Employee).order_by(Employee.id)).all())
