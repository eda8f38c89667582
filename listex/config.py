from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from listex.models import API_URL, API_VERSION, Format


class Settings(BaseSettings):
    api_key: str = ""
    base_url: str = API_URL
    api_version: str = API_VERSION
    auth_param: str = "apikey"
    response_format: Format = Format.JSON
    timeout: float = 30.0
    log_format: str = "text"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="LISTEX_", env_file=".env", env_file_encoding="utf-8",
    )

    @field_validator("response_format", mode="before")
    @classmethod
    def lowercase_format(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value


settings = Settings()
