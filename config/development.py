import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DATA_DIR = os.getenv("DATA_DIR", "data")
EMPLOYEE_FILE = os.getenv("EMPLOYEE_FILE", "employees.json")
ADMIN_FILE = os.getenv("ADMIN_FILE", "admins.json")

ADMIN_ID = os.getenv("ADMIN_ID", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")

WORK_EMAIL_DOMAIN = os.getenv("WORK_EMAIL_DOMAIN", "example.com")
MIN_EMPLOYEE_AGE = int(os.getenv("MIN_EMPLOYEE_AGE", "18"))

# If enabled, updating an unknown employee id inserts it instead of failing
UPSERT_ON_UPDATE = bool(int(os.getenv("UPSERT_ON_UPDATE", "0")))

SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", "3600"))

DEBUG = True
