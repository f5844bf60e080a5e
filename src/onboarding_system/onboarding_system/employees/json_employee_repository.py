from __future__ import annotations

import logging
from typing import Callable, Dict, Sequence

from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..storage.json_store import JsonRecordStore, RawRecords
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _decode(records: RawRecords) -> Dict[str, Employee]:
    return {key: Employee.from_dict(value) for key, value in records.items()}


def _sort_key(employee: Employee):
    return (employee.first_name, employee.last_name, employee.id)


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, store: JsonRecordStore, *, upsert_on_update: bool = False):
        self._store = store
        self._upsert_on_update = bool(upsert_on_update)

    def list(self) -> Dict[str, Employee]:
        # The document is written back even on a read; on well-formed input this is a no-op.
        with self._store.document() as records:
            return _decode(records)

    def list_sorted(self) -> Sequence[Employee]:
        with self._store.document(write=False) as records:
            employees = list(_decode(records).values())
        employees.sort(key=_sort_key)
        return employees

    def paginate(self, page: int, limit: int) -> Sequence[Employee]:
        if page < 1 or limit < 1:
            return []
        start = (page - 1) * limit
        return list(self.list_sorted()[start : start + limit])

    def count(self) -> int:
        with self._store.document(write=False) as records:
            return len(records)

    def exists_by_name(self, first_name: str, last_name: str) -> bool:
        with self._store.document(write=False) as records:
            return any(e.has_name(first_name, last_name) for e in _decode(records).values())

    def save(self, employee: Employee) -> bool:
        if not employee.id:
            raise ValidationError("Employee id is required")

        with self._store.document() as records:
            if any(e.has_name(employee.first_name, employee.last_name) for e in _decode(records).values()):
                logger.debug("Employee %r already exists, not saved", employee.full_name)
                return False
            records[employee.id] = employee.to_dict()

        logger.info("Saved employee %s (%s)", employee.id, employee.full_name)
        return True

    def update(self, employee: Employee) -> Employee:
        with self._store.document() as records:
            if employee.id not in records and not self._upsert_on_update:
                raise NotFoundError(f"Employee {employee.id!r} not found")
            records[employee.id] = employee.to_dict()

        logger.info("Updated employee %s", employee.id)
        return employee

    def delete(self, employee_id: str) -> bool:
        with self._store.document() as records:
            removed = records.pop(employee_id, None)

        if removed is None:
            logger.debug("Delete of unknown employee %s ignored", employee_id)
            return False
        logger.info("Deleted employee %s", employee_id)
        return True

    def get_by_id(self, employee_id: str) -> Employee:
        with self._store.document(write=False) as records:
            raw = records.get(employee_id)
            if raw is None:
                raise NotFoundError(f"Employee {employee_id!r} not found")
            return Employee.from_dict(raw)

    def get_by_handle(self, handle: str) -> Employee:
        with self._store.document(write=False) as records:
            for employee in _decode(records).values():
                if employee.handle is not None and employee.handle == handle:
                    return employee
        raise NotFoundError(f"Employee with handle {handle!r} not found")

    def modify(self, employee_id: str, change: Callable[[Employee, Sequence[Employee]], Employee]) -> Employee:
        """Apply ``change`` to one record inside a single locked read-modify-write.

        ``change`` receives the current record and every other record. Whatever it
        raises propagates and leaves the file untouched.
        """
        with self._store.document() as records:
            employees = _decode(records)
            current = employees.pop(employee_id, None)
            if current is None:
                raise NotFoundError(f"Employee {employee_id!r} not found")

            changed = change(current, list(employees.values()))
            if changed.id != employee_id:
                raise ValidationError("Employee id cannot be changed")
            if any(e.has_name(changed.first_name, changed.last_name) for e in employees.values()):
                raise ConflictError(f"Employee '{changed.full_name}' already exists")
            records[employee_id] = changed.to_dict()

        logger.info("Modified employee %s", employee_id)
        return changed
