"""Client configuration with environment variable loading.

Pydantic-based configuration for the backend URL and the NiceGUI server.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the PDF Q&A client.

    Attributes:
        api_base_url: Root URL of the document Q&A backend.
        title: Browser tab and header title.
        host: Interface the NiceGUI server binds to.
        port: Port the NiceGUI server listens on.
        upload_accept: File picker filter hint; the backend does the real filtering.
        storage_secret: Optional NiceGUI storage secret.
    """

    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
        description="Backend root URL",
    )
    title: str = Field(
        default_factory=lambda: os.getenv("APP_TITLE", "PDF Q&A System"),
        description="Application title",
    )
    host: str = Field(
        default_factory=lambda: os.getenv("HOST", "0.0.0.0"),
        description="Bind address for the UI server",
    )
    port: int = Field(
        default_factory=lambda: int(os.getenv("PORT", "8080")),
        ge=1,
        le=65535,
        description="Port for the UI server",
    )
    upload_accept: str = Field(
        default_factory=lambda: os.getenv("UPLOAD_ACCEPT", ".pdf"),
        description="Accept filter passed to the file picker",
    )
    storage_secret: str | None = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET") or None,
        description="NiceGUI storage secret",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If API_BASE_URL is not an http(s) URL.
    """
    return ClientConfig()
