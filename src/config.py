from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # App
    APP_NAME: str = "calculator-microservice"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    ERROR_LOG_FILE: str = "error.log"
    COMBINED_LOG_FILE: str = "combined.log"

    # Validation
    # True keeps the original `div OR (mod AND num2 == 0)` grouping
    LEGACY_DIVISION_CHECK: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

@lru_cache()
def get_settings() -> Settings:
    return Settings()
