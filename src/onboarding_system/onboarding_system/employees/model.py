from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..core.exceptions import DataParseError


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee going through onboarding.

    `password` holds the plaintext temporary password right after onboarding and
    its hash once `secure_password` is set.
    """

    id: str
    first_name: str
    last_name: str
    age: int
    diploma: str = ""
    personal_email: Optional[str] = None
    work_email: Optional[str] = None
    onboarded: bool = False
    handle: Optional[str] = None
    password: Optional[str] = None
    secure_password: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def has_name(self, first_name: str, last_name: str) -> bool:
        return self.first_name == first_name and self.last_name == last_name

    def to_dict(self) -> dict:
        return asdict(self)

    def to_public_dict(self) -> dict:
        """Representation for API responses: a stored hash is never sent out."""
        data = asdict(self)
        if self.secure_password:
            data["password"] = None
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        try:
            return cls(
                id=str(data["id"]),
                first_name=str(data["first_name"]),
                last_name=str(data["last_name"]),
                age=int(data["age"]),
                diploma=data.get("diploma") or "",
                personal_email=data.get("personal_email"),
                work_email=data.get("work_email"),
                onboarded=bool(data.get("onboarded") or False),
                handle=data.get("handle"),
                password=data.get("password"),
                secure_password=bool(data.get("secure_password") or False),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataParseError(f"Invalid employee record: {e!r}") from e


@dataclass(frozen=True)
class EmployeePage:
    items: list[Employee]
    total: int
    page: int
    limit: int
