from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..core.exceptions import DataParseError


@dataclass(frozen=True)
class Admin:
    id: str
    password: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Admin":
        try:
            return cls(id=str(data["id"]), password=data.get("password"))
        except (KeyError, TypeError) as e:
            raise DataParseError(f"Invalid admin record: {e!r}") from e
