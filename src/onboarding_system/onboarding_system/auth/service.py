from __future__ import annotations

import hmac
import logging
from typing import Optional

from ..admins.repository import AdminRepository
from ..core.exceptions import AuthenticationError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .credentials import is_password_hash, verify_hashed_password
from .session import Session, SessionManager

logger = logging.getLogger(__name__)


def _password_matches(stored: Optional[str], candidate: str, *, hashed: bool) -> bool:
    if not stored or not candidate:
        return False
    if hashed:
        return verify_hashed_password(candidate, stored)
    return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))


class AuthService:
    """Use case: admin login/logout and credential checks."""

    def __init__(self, admins: AdminRepository, sessions: SessionManager, employees: Optional[EmployeeRepository] = None):
        self._admins = admins
        self._sessions = sessions
        self._employees = employees

    def login(self, identifier: str, password: str) -> Session:
        identifier = (identifier or "").strip()
        try:
            admin = self._admins.get_by_id(identifier)
        except NotFoundError:
            admin = None

        if admin is None or not _password_matches(admin.password, password or "", hashed=is_password_hash(admin.password)):
            logger.warning("Failed login attempt for %r", identifier)
            raise AuthenticationError("Invalid username or password")

        logger.info("Admin %r logged in", identifier)
        return self._sessions.start(admin.id)

    def logout(self, token: Optional[str]) -> bool:
        return self._sessions.end(token)

    def require_session(self, token: Optional[str]) -> Session:
        return self._sessions.require(token)

    def verify_employee(self, handle: str, password: str) -> Employee:
        if self._employees is None:
            raise AuthenticationError("Employee credentials are not available")
        try:
            employee = self._employees.get_by_handle((handle or "").strip())
        except NotFoundError:
            employee = None

        if employee is None or not _password_matches(employee.password, password or "", hashed=employee.secure_password):
            logger.warning("Failed credential check for handle %r", handle)
            raise AuthenticationError("Invalid handle or password")
        return employee
