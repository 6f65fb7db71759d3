from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    app_port: int = 8000

    log_level: str = "INFO"

    # calendar used for "today" when the caller does not pass one
    timezone: str = "UTC"

settings = Settings()
