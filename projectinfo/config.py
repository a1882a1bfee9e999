from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

METADATA_PROJECT_ID_URL = (
    "http://metadata.google.internal/computeMetadata/v1/project/project-id"
)
DEFAULT_PORT = 8080


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(populate_by_name=True, env_ignore_empty=True)

    project: Optional[str] = Field(None, validation_alias="GOOGLE_CLOUD_PROJECT")
    port: int = Field(DEFAULT_PORT, validation_alias="PORT")
    host: str = Field("0.0.0.0", validation_alias="HOST")
    metadata_url: str = Field(METADATA_PROJECT_ID_URL, validation_alias="METADATA_URL")
    timeout_metadata: Optional[float] = Field(5.0, validation_alias="TIMEOUT_METADATA")
    debug: bool = Field(False, validation_alias="DEBUG")

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, v: Any) -> int:
        # PORT=abc should not keep the service from starting
        try:
            return int(v)
        except (TypeError, ValueError):
            return DEFAULT_PORT
