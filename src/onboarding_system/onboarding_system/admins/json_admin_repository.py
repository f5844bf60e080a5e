from __future__ import annotations

import logging

from ..core.exceptions import NotFoundError
from ..storage.json_store import JsonRecordStore
from .model import Admin
from .repository import AdminRepository

logger = logging.getLogger(__name__)


class JsonAdminRepository(AdminRepository):
    def __init__(self, store: JsonRecordStore):
        self._store = store

    def get_by_id(self, admin_id: str) -> Admin:
        with self._store.document(write=False) as records:
            raw = records.get(admin_id)
            if raw is None:
                raise NotFoundError(f"Admin {admin_id!r} not found")
            return Admin.from_dict(raw)

    def exists(self, admin_id: str) -> bool:
        with self._store.document(write=False) as records:
            return admin_id in records

    def add(self, admin: Admin) -> None:
        with self._store.document() as records:
            records[admin.id] = admin.to_dict()
        logger.info("Stored admin %r", admin.id)
