from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "chat-microservice"
    app_version: str = "0.0.1-SNAPSHOT"
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Networking
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    frontend_origin: str = Field(default="http://localhost:8080")

    # Database
    database_url: str = Field(default="sqlite:///./chat.db")
    sql_echo: bool = Field(default=False)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
