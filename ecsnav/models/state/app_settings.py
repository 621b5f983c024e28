"""Application settings models."""

from pydantic import BaseModel, ConfigDict, field_validator

from ecsnav.constants.defaults import LOG_LEVEL_DEFAULT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Navigation
    cluster_prefix: str = ""
    default_region: str | None = None

    # Connect (shell sessions are not available yet; the key is only reported)
    ssh_key: str = ""

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = ""

    @field_validator("cluster_prefix", "ssh_key", "log_file", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("default_region", mode="before")
    @classmethod
    def _blank_region_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value
