from __future__ import annotations

import threading
from typing import Dict, Optional

import pytest

from onboarding_system.auth.credentials import verify_hashed_password
from onboarding_system.core.exceptions import ConflictError, NotFoundError, ValidationError
from onboarding_system.employees.json_employee_repository import JsonEmployeeRepository
from onboarding_system.employees.model import Employee
from onboarding_system.employees.service import EmployeeService


class InMemoryEmployees:
    def __init__(self):
        self.by_id: Dict[str, Employee] = {}

    def list(self):
        return dict(self.by_id)

    def list_sorted(self):
        return sorted(self.by_id.values(), key=lambda e: (e.first_name, e.last_name, e.id))

    def paginate(self, page: int, limit: int):
        start = (page - 1) * limit
        return self.list_sorted()[start : start + limit]

    def count(self) -> int:
        return len(self.by_id)

    def exists_by_name(self, first_name: str, last_name: str) -> bool:
        return any(e.has_name(first_name, last_name) for e in self.by_id.values())

    def save(self, employee: Employee) -> bool:
        if self.exists_by_name(employee.first_name, employee.last_name):
            return False
        self.by_id[employee.id] = employee
        return True

    def update(self, employee: Employee) -> Employee:
        if employee.id not in self.by_id:
            raise NotFoundError(employee.id)
        self.by_id[employee.id] = employee
        return employee

    def delete(self, employee_id: str) -> bool:
        return self.by_id.pop(employee_id, None) is not None

    def get_by_id(self, employee_id: str) -> Employee:
        try:
            return self.by_id[employee_id]
        except KeyError:
            raise NotFoundError(employee_id)

    def get_by_handle(self, handle: str) -> Employee:
        for e in self.by_id.values():
            if e.handle == handle:
                return e
        raise NotFoundError(handle)

    def modify(self, employee_id: str, change) -> Employee:
        current = self.get_by_id(employee_id)
        others = [e for e in self.by_id.values() if e.id != employee_id]
        changed = change(current, others)
        if any(e.has_name(changed.first_name, changed.last_name) for e in others):
            raise ConflictError(changed.full_name)
        self.by_id[employee_id] = changed
        return changed


@pytest.fixture
def repo():
    return InMemoryEmployees()


@pytest.fixture
def svc(repo):
    return EmployeeService(repo, work_email_domain="corp.test")


def create(svc, first="John", last="Doe", age=30, diploma="BSc", personal_email: Optional[str] = None):
    return svc.create(first_name=first, last_name=last, age=age, diploma=diploma, personal_email=personal_email)


def test_create_sets_initial_state(svc, repo):
    employee = create(svc, personal_email="john@mail.test")

    assert repo.get_by_id(employee.id) == employee
    assert employee.onboarded is False
    assert employee.handle is None
    assert employee.password is None
    assert employee.secure_password is False


def test_create_duplicate_name_conflicts(svc, repo):
    create(svc)

    with pytest.raises(ConflictError):
        create(svc, age=40)
    assert repo.count() == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"first": "  "},
        {"last": ""},
        {"age": "abc"},
        {"age": -1},
        {"age": 17},
        {"diploma": ""},
        {"personal_email": "not-an-email"},
    ],
)
def test_create_validation(svc, kwargs):
    with pytest.raises(ValidationError):
        create(svc, **kwargs)


def test_create_accepts_numeric_string_age(svc):
    assert create(svc, age="21").age == 21


def test_onboard_assigns_handle_email_and_password(svc, repo):
    employee = create(svc)

    onboarded = svc.onboard(employee.id)

    assert onboarded.onboarded is True
    assert onboarded.handle == "jdoe"
    assert onboarded.work_email == "jdoe@corp.test"
    assert len(onboarded.password) == 9
    assert onboarded.secure_password is False
    assert repo.get_by_id(employee.id) == onboarded


def test_onboard_twice_conflicts(svc):
    employee = create(svc)
    svc.onboard(employee.id)

    with pytest.raises(ConflictError):
        svc.onboard(employee.id)


def test_onboard_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.onboard("missing")


def test_handle_collision_gets_suffix(svc):
    first = create(svc, first="John", last="Doe")
    second = create(svc, first="Jane", last="Doe")

    assert svc.onboard(first.id).handle == "jdoe"
    assert svc.onboard(second.id).handle == "jdoe2"


def test_secure_password_hashes_plaintext(svc):
    employee = create(svc)
    plaintext = svc.onboard(employee.id).password

    secured = svc.secure_password(employee.id)

    assert secured.secure_password is True
    assert secured.password != plaintext
    assert verify_hashed_password(plaintext, secured.password)


def test_secure_password_requires_onboarding(svc):
    employee = create(svc)

    with pytest.raises(ValidationError):
        svc.secure_password(employee.id)


def test_secure_password_twice_is_rejected(svc):
    employee = create(svc)
    svc.onboard(employee.id)
    svc.secure_password(employee.id)

    with pytest.raises(ValidationError):
        svc.secure_password(employee.id)


def test_list_page_defaults_and_bounds(svc):
    for first in ["Ann", "Bob", "Cid"]:
        create(svc, first=first)

    page = svc.list_page(None, None)
    assert (page.page, page.limit, page.total) == (1, 10, 3)
    assert [e.first_name for e in page.items] == ["Ann", "Bob", "Cid"]

    assert [e.first_name for e in svc.list_page(2, 2).items] == ["Cid"]
    with pytest.raises(ValidationError):
        svc.list_page(0, 10)
    with pytest.raises(ValidationError):
        svc.list_page(1, 0)


def test_edit_keeps_onboarding_fields(svc):
    employee = create(svc)
    onboarded = svc.onboard(employee.id)

    edited = svc.edit(employee.id, first_name="John", last_name="Doe", age=31, diploma="MSc")

    assert edited.age == 31
    assert edited.diploma == "MSc"
    assert edited.handle == onboarded.handle
    assert edited.password == onboarded.password


def test_edit_rename_onto_existing_name_conflicts(svc):
    create(svc, first="Ann", last="Lee")
    bob = create(svc, first="Bob", last="Lee")

    with pytest.raises(ConflictError):
        svc.edit(bob.id, first_name="Ann", last_name="Lee", age=30, diploma="BSc")


def test_delete_is_idempotent(svc):
    employee = create(svc)

    assert svc.delete(employee.id) is True
    assert svc.delete(employee.id) is False


@pytest.fixture
def json_repo(employee_store):
    return JsonEmployeeRepository(employee_store)


def test_onboard_racing_an_edit_is_not_lost(json_repo, monkeypatch):
    svc = EmployeeService(json_repo, work_email_domain="corp.test")
    employee = create(svc)
    modify = json_repo.modify
    racers = []

    def modify_with_racing_onboard(employee_id, change):
        def racing_change(current, others):
            if not racers:
                racer = threading.Thread(target=svc.onboard, args=(employee_id,))
                racers.append(racer)
                racer.start()
            return change(current, others)

        return modify(employee_id, racing_change)

    monkeypatch.setattr(json_repo, "modify", modify_with_racing_onboard)
    svc.edit(employee.id, first_name="John", last_name="Doe", age=31, diploma="MSc")
    racers[0].join()

    stored = json_repo.get_by_id(employee.id)
    assert stored.age == 31
    assert stored.diploma == "MSc"
    assert stored.onboarded is True
    assert stored.handle == "jdoe"
    assert stored.work_email == "jdoe@corp.test"


def test_concurrent_onboards_get_distinct_handles(json_repo):
    svc = EmployeeService(json_repo)
    employees = [create(svc, first=first) for first in ["John", "Jack", "Jane", "Jill", "Joe", "Jim", "Jean", "Joan"]]

    threads = [threading.Thread(target=svc.onboard, args=(e.id,)) for e in employees]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    handles = [json_repo.get_by_id(e.id).handle for e in employees]
    assert sorted(handles) == sorted(["jdoe"] + [f"jdoe{n}" for n in range(2, 9)])


def test_same_employee_is_onboarded_once(json_repo):
    svc = EmployeeService(json_repo)
    employee = create(svc)
    outcomes = []

    def worker() -> None:
        try:
            outcomes.append(svc.onboard(employee.id).password)
        except ConflictError:
            outcomes.append(None)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    passwords = [p for p in outcomes if p is not None]
    assert len(passwords) == 1
    assert json_repo.get_by_id(employee.id).password == passwords[0]
