"""Environment-driven settings.

The REST core never reads configuration on its own: callers load
``BasispoortSettings`` explicitly and hand it to
``RestClientBuilder.from_settings``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import Environment


class BasispoortSettings(BaseSettings):
    """Connection settings, read from environment variables and ``.env``.

    Variables are unprefixed to match the names used by existing deployments
    (``IDENTITY_CERT_FILE``, ``ENVIRONMENT``).
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    identity_cert_file: Path = Field(
        ...,
        description="PEM file holding the client certificate and its private key.",
    )
    environment: Environment = Field(
        ...,
        description="Basispoort environment: test, acceptance, staging or production.",
    )
    connect_timeout: float = Field(default=10.0, gt=0, description="Connect timeout (seconds).")
    timeout: float = Field(default=30.0, gt=0, description="Total request timeout (seconds).")
    hosted_license_provider_identity_code: str | None = Field(
        default=None,
        min_length=1,
        description="Identity code of the hosted license provider (\"Hosted Lika\").",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def parse_environment(cls, value: Any) -> Environment:
        if isinstance(value, Environment):
            return value
        return Environment.parse(value)
