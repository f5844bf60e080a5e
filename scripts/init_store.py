from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "onboarding_system"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from onboarding_system.container import build_container
from onboarding_system.main import load_settings


def main() -> None:
    settings = load_settings()
    container = build_container(settings=settings)

    print(
        "OK: Data files ready -> "
        f"{container.employee_store.path} ({container.employees_repo.count()} employees), "
        f"{container.admin_store.path} (admin={settings.get('ADMIN_ID')})"
    )


if __name__ == "__main__":
    main()
