from __future__ import annotations

import logging
from pathlib import Path

from ..admins.model import Admin
from ..admins.repository import AdminRepository
from ..auth.credentials import hash_password

logger = logging.getLogger(__name__)


def create_persistence_store(data_dir: str | Path, *file_names: str) -> list[Path]:
    """Create the data directory and empty data files that do not exist yet.

    A zero-length file is read as "no records" until the first write.
    """
    data_dir = Path(data_dir)
    if data_dir.exists():
        logger.info("Persistence directory already exists: %s", data_dir)
    else:
        logger.info("Creating persistence directory: %s", data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)

    paths: list[Path] = []
    for name in file_names:
        path = data_dir / name
        if path.exists():
            logger.info("Persistence file already exists: %s", path)
        else:
            logger.info("Creating persistence file: %s", path)
            path.touch()
        paths.append(path)
    return paths


def ensure_admin(admins: AdminRepository, *, admin_id: str, password: str) -> bool:
    """Create the admin record if it is missing. Returns True when one was created."""
    if admins.exists(admin_id):
        return False

    admins.add(Admin(id=admin_id, password=hash_password(password)))
    logger.info("Created admin account %r", admin_id)
    return True
