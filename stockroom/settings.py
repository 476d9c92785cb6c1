import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="STOCKROOM_", extra="ignore")

    log_level: str = "INFO"
    log_json: bool = False
    log_access: bool = False

    cors_origin: str = "http://localhost:4200"
    host: str = "127.0.0.1"
    port: int = 3000
    api_version: str = "1.0.0"

    default_min_stock: int = 10
    bill_due_days: int = 30

    seed_demo_data: bool = True
    seed_random_seed: int = 2024


settings = Settings()
