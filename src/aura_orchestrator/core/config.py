"""Core configuration for the assistant."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from aura_orchestrator.logging import configure_logging


class LLMConfig(BaseSettings):
    """Configuration for the language service."""

    provider: Literal["openai"] = Field(
        default="openai",
        description="Language service provider to use",
    )

    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Chat model used for completions, actions and task suggestions",
    )
    openai_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Temperature for the chat model",
    )
    image_model: str = Field(
        default="dall-e-3",
        description="Model used for image generation",
    )
    image_size: str = Field(
        default="1024x1024",
        description="Requested size of generated images",
    )

    history_limit: int = Field(
        default=20,
        gt=0,
        description="Number of chat messages replayed to the model on each completion",
    )
    max_task_suggestions: int = Field(
        default=3,
        ge=0,
        description="Upper bound on task suggestions kept per turn",
    )
    file_context_chars: int = Field(
        default=8000,
        gt=0,
        description="Maximum characters of each uploaded file injected as context",
    )

    model_config = SettingsConfigDict(
        env_prefix="AURA_LLM_",
        env_file=".env",
        extra="ignore",
    )


class BookingConfig(BaseSettings):
    """Configuration for the booking backend."""

    base_url: str | None = Field(
        default=None,
        description="Base URL of the booking backend; booking requests are unhandled when unset",
    )
    api_key: str | None = Field(
        default=None,
        description="Bearer token sent to the booking backend",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout for booking requests",
    )

    model_config = SettingsConfigDict(
        env_prefix="AURA_BOOKING_",
        env_file=".env",
        extra="ignore",
    )


class FileConfig(BaseSettings):
    """Configuration for uploaded files."""

    max_upload_bytes: int = Field(
        default=100 * 1024 * 1024,
        gt=0,
        description="Largest accepted upload in bytes",
    )

    model_config = SettingsConfigDict(
        env_prefix="AURA_FILES_",
        env_file=".env",
        extra="ignore",
    )


class AssistantConfig(BaseSettings):
    """Main configuration for the assistant."""

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    assistant_name: str = Field(
        default="A.U.R.A",
        description="Name the assistant uses for itself",
    )

    llm: LLMConfig = Field(
        default_factory=LLMConfig,
        description="Language service configuration",
    )
    booking: BookingConfig = Field(
        default_factory=BookingConfig,
        description="Booking backend configuration",
    )
    files: FileConfig = Field(
        default_factory=FileConfig,
        description="Uploaded file configuration",
    )

    model_config = SettingsConfigDict(
        env_prefix="AURA_",
        env_file=".env",
        extra="ignore",
    )

    def setup_logging(self) -> None:
        """Configure logging based on settings."""
        configure_logging(self.log_level, debug=self.debug)
