import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    app_title: str = os.getenv("APP_TITLE", "Warehouse Inventory API")
    seed_demo_data: bool = _as_bool(os.getenv("SEED_DEMO_DATA", "True"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma separated, "*" allows everything
    cors_origins: list = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    default_min_stock_level: int = int(os.getenv("DEFAULT_MIN_STOCK_LEVEL", "10"))


settings = Settings()
