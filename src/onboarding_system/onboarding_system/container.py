from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .admins.json_admin_repository import JsonAdminRepository
from .auth.service import AuthService
from .auth.session import SessionManager
from .core.constants import (
    ADMIN_FILE_NAME,
    DEFAULT_ADMIN_ID,
    DEFAULT_MIN_EMPLOYEE_AGE,
    DEFAULT_WORK_EMAIL_DOMAIN,
    EMPLOYEE_FILE_NAME,
    SESSION_TTL_SECONDS,
)
from .employees.json_employee_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .storage.bootstrap import create_persistence_store, ensure_admin
from .storage.json_store import JsonRecordStore


@dataclass(frozen=True)
class Container:
    employee_store: JsonRecordStore
    admin_store: JsonRecordStore

    employees_repo: JsonEmployeeRepository
    admins_repo: JsonAdminRepository
    sessions: SessionManager

    auth_service: AuthService
    employee_service: EmployeeService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    data_dir = Path(settings.get("DATA_DIR", "data"))
    employee_path, admin_path = create_persistence_store(
        data_dir,
        str(settings.get("EMPLOYEE_FILE", EMPLOYEE_FILE_NAME)),
        str(settings.get("ADMIN_FILE", ADMIN_FILE_NAME)),
    )

    employee_store = JsonRecordStore(employee_path)
    admin_store = JsonRecordStore(admin_path)
    employee_store.ensure_readable()
    admin_store.ensure_readable()

    employees_repo = JsonEmployeeRepository(
        employee_store,
        upsert_on_update=bool(settings.get("UPSERT_ON_UPDATE", False)),
    )
    admins_repo = JsonAdminRepository(admin_store)

    admin_id = str(settings.get("ADMIN_ID", DEFAULT_ADMIN_ID))
    admin_password = settings.get("ADMIN_PASSWORD")
    if admin_password:
        ensure_admin(admins_repo, admin_id=admin_id, password=str(admin_password))

    sessions = SessionManager(ttl_seconds=int(settings.get("SESSION_TTL_SECONDS", SESSION_TTL_SECONDS)))

    auth_service = AuthService(admins_repo, sessions, employees_repo)
    employee_service = EmployeeService(
        employees_repo,
        work_email_domain=str(settings.get("WORK_EMAIL_DOMAIN", DEFAULT_WORK_EMAIL_DOMAIN)),
        min_age=int(settings.get("MIN_EMPLOYEE_AGE", DEFAULT_MIN_EMPLOYEE_AGE)),
    )

    return Container(
        employee_store=employee_store,
        admin_store=admin_store,
        employees_repo=employees_repo,
        admins_repo=admins_repo,
        sessions=sessions,
        auth_service=auth_service,
        employee_service=employee_service,
    )
