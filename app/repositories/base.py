"""Store protocol the employee query engine reads and writes through."""

from typing import Optional, Protocol

from app.models.employee import Employee


class EmployeeStore(Protocol):
    """Per-record CRUD plus bulk enumeration of employee rows.

    Implementations raise app.core.exceptions.StoreError when the backend
    fails; absent records are reported through return values instead.
    """

    def add(self, employee: Employee) -> Employee:
        """Persist a new employee and return it with its assigned id."""
        ...

    def get(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with this id, or None."""
        ...

    def update(self, employee: Employee) -> Optional[Employee]:
        """Overwrite the stored fields of employee.id; None if the id is unknown."""
        ...

    def delete(self, employee_id: int) -> bool:
        """Remove the employee; False if no such record exists."""
        ...

    def enumerate(self) -> list[Employee]:
        """Return every stored employee in ascending id order."""
        ...
