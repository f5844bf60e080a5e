from __future__ import annotations

from typing import Protocol

from .model import Admin


class AdminRepository(Protocol):
    def get_by_id(self, admin_id: str) -> Admin:
        raise NotImplementedError

    def exists(self, admin_id: str) -> bool:
        raise NotImplementedError

    def add(self, admin: Admin) -> None:
        raise NotImplementedError
