"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = 10
HTML_LIST_LIMIT = 1000

DEFAULT_ADMIN_ID = "admin"
DEFAULT_MIN_EMPLOYEE_AGE = 18
DEFAULT_WORK_EMAIL_DOMAIN = "example.com"

SESSION_TTL_SECONDS = 3600
SESSION_TOKEN_DELIMITER = ":"
SESSION_TOKEN_RANDOM_LENGTH = 30

PASSWORD_HASH_METHOD = "pbkdf2:sha256"
PASSWORD_SALT_LENGTH = 16

EMPLOYEE_FILE_NAME = "employees.json"
ADMIN_FILE_NAME = "admins.json"

APP_TITLE = "Employee Onboarding"
