"""Configuration settings for acceptnorm.

This module defines the negotiation limits, the outgoing Accept header
policy of the HTTP client and the MCP server configuration. Settings are
loaded from environment variables and .env files.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param max_media_types: Maximum media ranges or preferences parsed per call
    :type max_media_types: int
    :param accept_strategy: How the HTTP client rewrites outgoing Accept headers
    :type accept_strategy: Literal["canonicalize", "filter", "best_match"]
    :param preferred_types: Comma-separated media types the client prefers
    :type preferred_types: Optional[str]
    :param mcp_server_name: Name of the MCP server
    :type mcp_server_name: str
    :param mcp_server_host: Host for the MCP server
    :type mcp_server_host: str
    :param mcp_server_port: Port for the MCP server
    :type mcp_server_port: int
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Negotiation limits
    max_media_types: int = Field(
        64,
        ge=1,
        le=1024,
        alias="ACCEPTNORM_MAX_MEDIA_TYPES",
        description=(
            "Maximum media ranges parsed per header (excess is dropped); "
            "default capacity of every negotiation state"
        ),
    )

    # Outgoing Accept header policy
    accept_strategy: Literal["canonicalize", "filter", "best_match"] = Field(
        "canonicalize",
        alias="ACCEPTNORM_ACCEPT_STRATEGY",
        description="Strategy applied to outgoing Accept headers",
    )
    preferred_types: Optional[str] = Field(
        None,
        alias="ACCEPTNORM_PREFERRED_TYPES",
        description="Comma-separated media types this client can consume",
    )

    # MCP Server Configuration
    mcp_server_name: str = Field("acceptnorm", description="MCP Server Name")
    mcp_server_host: str = Field("127.0.0.1", description="MCP Server Host")
    mcp_server_port: int = Field(9080, description="MCP Server Port")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("preferred_types")
    @classmethod
    def normalize_preferred_types(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank preference lists as unset.

        :param v: Raw preference list
        :type v: Optional[str]
        :return: Stripped preference list or None
        :rtype: Optional[str]
        """
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


settings = Settings()
"""Global settings instance, created once at import time."""
