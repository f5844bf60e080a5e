from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .auth.controller import register as register_auth
from .container import build_container
from .employees.api import register as register_api
from .employees.controller import register as register_employees

SETTING_KEYS = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "DATA_DIR",
    "EMPLOYEE_FILE",
    "ADMIN_FILE",
    "ADMIN_ID",
    "ADMIN_PASSWORD",
    "WORK_EMAIL_DOMAIN",
    "MIN_EMPLOYEE_AGE",
    "UPSERT_ON_UPDATE",
    "SESSION_TTL_SECONDS",
)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {key: getattr(module, key) for key in SETTING_KEYS if hasattr(module, key)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings = load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"))
    logger = logging.getLogger(__name__)

    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))
    app.config["TESTING"] = bool(settings.get("TESTING", False))

    logger.info(
        "settings=%s data_dir=%s",
        settings["SETTINGS_MODULE"],
        settings.get("DATA_DIR"),
    )

    container = build_container(settings=settings)
    app.extensions["onboarding_container"] = container

    register_auth(app, container)
    register_api(app, container)
    register_employees(app, container)

    return app


def run() -> None:
    app = create_app()
    settings = load_settings()
    app.run(host=settings.get("HOST", "0.0.0.0"), port=int(settings.get("PORT", 8080)), threaded=True)


if __name__ == "__main__":
    run()
