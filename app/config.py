from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    ENV: str = "local"

    app_name: str = "Padre Gino's Pizza API"
    app_version: str = "1.0.0"

    database_url: str = "sqlite+aiosqlite:///./pizza.db"
    db_echo: bool = False
    db_timeout_seconds: float = 5.0

    # comma separated, added to http://localhost:3000
    allowed_origins: str = ""

    static_dir: str = "public"
    past_orders_page_size: int = 20

    log_level: str = "INFO"

    @property
    def cors_origins(self) -> List[str]:
        extra = [origin.strip() for origin in self.allowed_origins.split(",")]
        return ["http://localhost:3000", *[origin for origin in extra if origin]]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
