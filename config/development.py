import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_db"),
}

ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
PORT = int(os.getenv("PORT", "3000"))

# Authoritative two-tier rule (server) and the advisory dashboard ceiling.
BUDGET_FIRST_TIER = float(os.getenv("BUDGET_FIRST_TIER", "9.5"))
BUDGET_SECOND_TIER = float(os.getenv("BUDGET_SECOND_TIER", "19"))
ADVISORY_DAILY_HOURS = float(os.getenv("ADVISORY_DAILY_HOURS", "8"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
