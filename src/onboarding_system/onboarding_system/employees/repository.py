from __future__ import annotations

from typing import Callable, Dict, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note: the service layer depends on this interface, not on a concrete storage backend.
    """

    def list(self) -> Dict[str, Employee]:
        raise NotImplementedError

    def list_sorted(self) -> Sequence[Employee]:
        raise NotImplementedError

    def paginate(self, page: int, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def exists_by_name(self, first_name: str, last_name: str) -> bool:
        raise NotImplementedError

    def save(self, employee: Employee) -> bool:
        raise NotImplementedError

    def update(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Employee:
        raise NotImplementedError

    def get_by_handle(self, handle: str) -> Employee:
        raise NotImplementedError

    def modify(self, employee_id: str, change: Callable[[Employee, Sequence[Employee]], Employee]) -> Employee:
        raise NotImplementedError
