from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # ─── Application ───────────────────────────────────────────────────────────
    APP_NAME:  str  = "Task Tracker"
    APP_ENV:   str  = "development"
    APP_DEBUG: bool = True
    APP_HOST:  str  = "0.0.0.0"
    APP_PORT:  int  = 5000
    API_PREFIX: str = ""

    # ─── Database ──────────────────────────────────────────────────────────────
    DATABASE_URL:  str  = "sqlite:///./task-tracker.db"
    DATABASE_ECHO: bool = False

    # ─── Seed ──────────────────────────────────────────────────────────────────
    SEED_DEMO_DATA: bool = True

    # ─── CORS ──────────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "*"

    def get_cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


settings = Settings()
