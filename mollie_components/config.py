from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Mollie Components"
    log_level: str = "INFO"

    # Database settings
    db_user: str = "shop_user"
    db_password: str = "shop_pwd"
    db_name: str = "shop"
    db_host: str = "localhost"
    db_port: int = 5432
    database_url: str | None = None

    # Database pool settings
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_echo: bool = False
    db_create_tables: bool = False

    # Mollie API settings
    mollie_api_base_url: str = "https://api.mollie.com/v2/"
    mollie_timeout_seconds: float = 10.0

    # Storefront used when a request does not name its sales channel
    default_sales_channel_id: str | None = None

    class Config:
        env_file = ".env"
        extra = "ignore"

    def get_database_url(self) -> str:
        """Get database URL, constructing a PostgreSQL one from components if not provided."""
        if self.database_url:
            # Convert to async format if needed
            if self.database_url.startswith("postgresql://"):
                return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return self.database_url

        # Construct from components
        password = quote_plus(self.db_password)
        return (
            f"postgresql+asyncpg://{self.db_user}:{password}@"
            f"{self.db_host}:{self.db_port}/{self.db_name}"
        )


@lru_cache
def get_settings():
    return Settings()
