"""Runtime configuration for the Aceternity UI MCP server."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ServerSettings(BaseSettings):
    """Environment-aware settings for the MCP server."""

    server_name: str = Field(
        "aceternity-ui", description="Server name reported during MCP initialization."
    )
    log_level: LogLevel = Field(default="INFO", description="Root logger level name.")
    log_file: Optional[str] = Field(
        default=None, description="Optional file that receives a copy of the log output."
    )

    model_config = SettingsConfigDict(
        env_prefix="ACETERNITY_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def get_settings() -> ServerSettings:
    return ServerSettings()
