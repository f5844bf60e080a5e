import os

SECRET_KEY = "test-secret"

HOST = "127.0.0.1"
PORT = 8080
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DATA_DIR = os.getenv("DATA_DIR", "data-test")
EMPLOYEE_FILE = "employees.json"
ADMIN_FILE = "admins.json"

ADMIN_ID = "admin"
ADMIN_PASSWORD = "admin-test"

WORK_EMAIL_DOMAIN = "example.com"
MIN_EMPLOYEE_AGE = 18

UPSERT_ON_UPDATE = False

SESSION_TTL_SECONDS = 3600

DEBUG = False
TESTING = True
