"""Employee store protocol and its implementations."""

from app.repositories.base import EmployeeStore
from app.repositories.memory import InMemoryEmployeeStore
from app.repositories.sql import SqlEmployeeStore

__all__ = [
    "EmployeeStore",
    "InMemoryEmployeeStore",
    "SqlEmployeeStore",
]
