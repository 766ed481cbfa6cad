"""Settings for the client runtime."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_host: str = Field(..., validation_alias="API_HOST")

    transport_backend: str = Field("httpx", validation_alias="TRANSPORT_BACKEND")

    request_timeout_seconds: float = Field(60.0, validation_alias="REQUEST_TIMEOUT_SECONDS")
    connect_timeout_seconds: float = Field(5.0, validation_alias="CONNECT_TIMEOUT_SECONDS")
    follow_redirects: bool = Field(True, validation_alias="FOLLOW_REDIRECTS")
    default_user_agent: str = Field("", validation_alias="DEFAULT_USER_AGENT")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
