"""Application configuration via environment variables."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

REDIRECT_STATUSES = (301, 302, 303, 307, 308)


class Settings(BaseSettings):
    supabase_url: str
    supabase_anon_key: str
    supabase_timeout: float = 10.0
    session_secret: str = "change-me-in-production"
    session_https_only: bool = False
    frontend_url: str = "http://localhost:3000"
    port: int = 3001
    session_backend: Literal["memory", "dynamodb"] = "memory"
    dynamodb_table: str = "draftgen_sessions"
    dynamodb_endpoint: str = ""  # For local DynamoDB
    aws_region: str = "us-east-1"

    # Post-logout redirect. "/login" for the main app, "/" for draft-gen.
    logout_destination: str = "/login"
    logout_redirect_status: int = 307
    invalidation_error_policy: Literal["log", "ignore"] = "log"
    trusted_origins: list[str] = []

    @field_validator("logout_destination")
    @classmethod
    def _destination_is_local_path(cls, v: str) -> str:
        if not v.startswith("/") or v.startswith("//"):
            raise ValueError("logout_destination must be an absolute path like '/login'")
        return v

    @field_validator("logout_redirect_status")
    @classmethod
    def _status_is_redirect(cls, v: int) -> int:
        if v not in REDIRECT_STATUSES:
            raise ValueError(f"logout_redirect_status must be one of {REDIRECT_STATUSES}")
        return v

    @field_validator("supabase_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def supabase_auth_url(self) -> str:
        return f"{self.supabase_url}/auth/v1"

    model_config = {"env_prefix": "", "case_sensitive": False}


settings: Settings | None = None


def get_settings() -> Settings:
    global settings
    if settings is None:
        settings = Settings()
    return settings


def override_settings(s: Settings) -> None:
    """For testing: inject a Settings instance."""
    global settings
    settings = s
