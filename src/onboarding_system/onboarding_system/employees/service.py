from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..auth.credentials import generate_handle, generate_random_password, hash_password
from ..common.validators import optional_email, require_int, require_non_empty
from ..core.constants import DEFAULT_MIN_EMPLOYEE_AGE, DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, DEFAULT_WORK_EMAIL_DOMAIN
from ..core.exceptions import ConflictError, ValidationError
from .model import Employee, EmployeePage
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records and onboard them."""

    def __init__(
        self,
        employees: EmployeeRepository,
        *,
        work_email_domain: str = DEFAULT_WORK_EMAIL_DOMAIN,
        min_age: int = DEFAULT_MIN_EMPLOYEE_AGE,
    ):
        self._employees = employees
        self._work_email_domain = work_email_domain
        self._min_age = int(min_age)

    def _validated_fields(
        self,
        *,
        first_name: Optional[str],
        last_name: Optional[str],
        personal_email: Optional[str],
        age: Any,
        diploma: Optional[str],
    ) -> dict:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        age = require_int(age, "Age", min_value=0)
        if age < self._min_age:
            raise ValidationError(f"Employee '{first_name} {last_name}' is not {self._min_age} years old yet")
        if not diploma or not diploma.strip():
            raise ValidationError(f"Employee '{first_name} {last_name}' does not have a diploma")
        return {
            "first_name": first_name,
            "last_name": last_name,
            "personal_email": optional_email(personal_email, "Personal email"),
            "age": age,
            "diploma": diploma.strip(),
        }

    def create(
        self,
        *,
        first_name: Optional[str],
        last_name: Optional[str],
        age: Any,
        diploma: Optional[str],
        personal_email: Optional[str] = None,
    ) -> Employee:
        fields = self._validated_fields(
            first_name=first_name,
            last_name=last_name,
            personal_email=personal_email,
            age=age,
            diploma=diploma,
        )
        employee = Employee(id=str(uuid.uuid4()), **fields)

        if not self._employees.save(employee):
            logger.warning("Employee %r already exists", employee.full_name)
            raise ConflictError(f"Employee '{employee.full_name}' already exists")
        return employee

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_sorted()

    def list_page(self, page: Any = DEFAULT_PAGE, limit: Any = DEFAULT_PAGE_LIMIT) -> EmployeePage:
        page = require_int(DEFAULT_PAGE if page is None else page, "Page", min_value=1)
        limit = require_int(DEFAULT_PAGE_LIMIT if limit is None else limit, "Limit", min_value=1)

        items = list(self._employees.paginate(page, limit))
        return EmployeePage(items=items, total=self._employees.count(), page=page, limit=limit)

    def get(self, employee_id: str) -> Employee:
        return self._employees.get_by_id(employee_id)

    def get_by_handle(self, handle: str) -> Employee:
        return self._employees.get_by_handle(handle)

    def edit(
        self,
        employee_id: str,
        *,
        first_name: Optional[str],
        last_name: Optional[str],
        age: Any,
        diploma: Optional[str],
        personal_email: Optional[str] = None,
    ) -> Employee:
        fields = self._validated_fields(
            first_name=first_name,
            last_name=last_name,
            personal_email=personal_email,
            age=age,
            diploma=diploma,
        )
        # Renaming onto another record's name is rejected by the repository.
        return self._employees.modify(employee_id, lambda current, _others: replace(current, **fields))

    def delete(self, employee_id: str) -> bool:
        return self._employees.delete(employee_id)

    def onboard(self, employee_id: str) -> Employee:
        def assign_credentials(employee: Employee, others: Sequence[Employee]) -> Employee:
            if employee.onboarded:
                raise ConflictError(f"Employee '{employee.full_name}' is already onboarded")

            handle = _unique_handle(employee, {e.handle for e in others if e.handle})
            return replace(
                employee,
                handle=handle,
                work_email=f"{handle}@{self._work_email_domain}",
                password=generate_random_password(),
                onboarded=True,
                secure_password=False,
            )

        onboarded = self._employees.modify(employee_id, assign_credentials)
        logger.info("Onboarded employee %s as %r", employee_id, onboarded.handle)
        return onboarded

    def secure_password(self, employee_id: str) -> Employee:
        secured = self._employees.modify(employee_id, _hash_plaintext_password)
        logger.info("Secured password of employee %s", employee_id)
        return secured


def _unique_handle(employee: Employee, taken: set[str]) -> str:
    base = generate_handle(employee.first_name, employee.last_name)
    handle, n = base, 1
    while handle in taken:
        n += 1
        handle = f"{base}{n}"
    return handle


def _hash_plaintext_password(employee: Employee, _others: Sequence[Employee]) -> Employee:
    if not employee.onboarded or not employee.password:
        raise ValidationError(f"Employee '{employee.full_name}' has no password to secure yet")
    if employee.secure_password:
        raise ValidationError(f"Password of '{employee.full_name}' is already secured")
    return replace(employee, password=hash_password(employee.password), secure_password=True)
