"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    CATALOG_SEED_PATH: str = os.getenv(
        "CATALOG_SEED_PATH", os.path.join(os.path.dirname(__file__), "catalog.json")
    )

    LOCAL_SUPPLIER_NAME: str = os.getenv("LOCAL_SUPPLIER_NAME", "Local Supplier")
    GLOBAL_SUPPLIER_NAME: str = os.getenv("GLOBAL_SUPPLIER_NAME", "Global Supplier")

    # Restock requests each supplier keeps in its inbox
    NOTIFICATION_HISTORY_SIZE: int = int(os.getenv("NOTIFICATION_HISTORY_SIZE", "100"))

    # Scheduled inventory audit
    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Berlin")
    AUDIT_INTERVAL_MINUTES: int = int(os.getenv("AUDIT_INTERVAL_MINUTES", "60"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
