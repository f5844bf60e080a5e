from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "onboarding_system"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from onboarding_system.container import build_container
from onboarding_system.core.exceptions import ConflictError
from onboarding_system.main import load_settings

DEMO_EMPLOYEES = [
    {"first_name": "John", "last_name": "Doe", "age": 30, "diploma": "BSc Computer Science", "personal_email": "john.doe@mail.test"},
    {"first_name": "Jane", "last_name": "Roe", "age": 27, "diploma": "MSc Mathematics", "personal_email": None},
    {"first_name": "Rob", "last_name": "Halford", "age": 52, "diploma": "High school", "personal_email": "rob@mail.test"},
]


def main() -> None:
    container = build_container(settings=load_settings())

    created = 0
    for row in DEMO_EMPLOYEES:
        try:
            container.employee_service.create(**row)
            created += 1
        except ConflictError as e:
            print(f"skip: {e}")

    print(f"OK: Seeded {created} employees -> {container.employee_store.path}")


if __name__ == "__main__":
    main()
