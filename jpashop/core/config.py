
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "JPA Shop API"
    app_env: str = "development"
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev, any async driver in prod)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./jpashop_dev.db",
        alias="DATABASE_URL",
    )

    # Hard cap on rows returned by order searches
    order_search_limit: int = Field(
        default=1000, alias="ORDER_SEARCH_LIMIT", ge=1,
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
