import threading
from typing import Optional

from app.models.employee import Employee


def _copy(employee: Employee) -> Employee:
    return Employee(
        id=employee.id,
        name=employee.name,
        role=employee.role,
        is_active=employee.is_active,
    )


class InMemoryEmployeeStore:
    """
    Dict-backed EmployeeStore for tests and local runs.

    Records are copied on the way in and out, so callers never hold a
    reference to stored state. Ids are assigned from a counter starting at 1
    and are never reused.
    """

    def __init__(self, employees: Optional[list[Employee]] = None):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        for employee in employees or []:
            self.add(employee)

    def add(self, employee: Employee) -> Employee:
        with self._lock:
            stored = _copy(employee)
            stored.id = self._next_id
            self._next_id += 1
            self._rows[stored.id] = stored
            return _copy(stored)

    def get(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            stored = self._rows.get(employee_id)
            return _copy(stored) if stored is not None else None

    def update(self, employee: Employee) -> Optional[Employee]:
        with self._lock:
            if employee.id not in self._rows:
                return None
            self._rows[employee.id] = _copy(employee)
            return _copy(employee)

    def delete(self, employee_id: int) -> bool:
        with self._lock:
            return self._rows.pop(employee_id, None) is not None

    def enumerate(self) -> list[Employee]:
        with self._lock:
            return [_copy(self._rows[key]) for key in sorted(self._rows)]

    def __len__(self) -> int:
        return len(self._rows)
