"""Configuration for the REST server.

The server hosts one session for one signed-in user. Authentication happens in
front of this service; the identity arrives through the environment.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aura_orchestrator.core.session import SessionUser


class ServerSettings(BaseSettings):
    """Settings for the REST API."""

    user_id: str = Field(default="local", validation_alias="AURA_USER_ID")
    user_email: str = Field(default="user@localhost", validation_alias="AURA_USER_EMAIL")
    user_name: str = Field(
        default="",
        validation_alias="AURA_USER_NAME",
        description="Full name used in the greeting; the email is used when empty.",
    )

    # Dev-friendly CORS (Vite). Override via AURA_CORS_ORIGINS=...
    cors_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        validation_alias="AURA_CORS_ORIGINS",
        description="Comma-separated list of allowed CORS origins.",
    )

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    def parsed_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def session_user(self) -> SessionUser:
        return SessionUser(
            user_id=self.user_id,
            email=self.user_email,
            full_name=self.user_name or None,
        )
