import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./rental.db")
    MIGRATION_DB_URI = data.get("MIGRATION_DB_URI", "sqlite:///./rental.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Caller identity, set by the upstream gateway
    AUTH_HEADER = data.get("AUTH_HEADER", "X-User-Id")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    # Accounts created as admins on sign-up
    ADMIN_EMAILS = data.get("ADMIN_EMAILS", [])

    # Wallet and rental amounts (minor units)
    WELCOME_BONUS = data.get("WELCOME_BONUS", 100000)
    DELIVERY_FEE = data.get("DELIVERY_FEE", 3000)
    DEFAULT_TOPUP_AMOUNT = data.get("DEFAULT_TOPUP_AMOUNT", 50000)

    # Rental system messages
    CHAT_NOTIFICATIONS_ENABLED = bool(data.get("CHAT_NOTIFICATIONS_ENABLED", True))
    RENTAL_NOTIFICATION_WEBHOOK = data.get("RENTAL_NOTIFICATION_WEBHOOK", None)

    # Ledger Reconciliation
    RECONCILIATION_ENABLED = bool(data.get("RECONCILIATION_ENABLED", True))
    RECONCILIATION_INTERVAL_SECONDS = data.get("RECONCILIATION_INTERVAL_SECONDS", 86400)  # Daily
