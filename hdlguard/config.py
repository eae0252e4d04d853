"""
HDLGuard Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
The analyzer core reads none of these; they shape the HTTP surface only.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Scanning ──
    max_code_length: int = Field(
        default=200_000, description="Max HDL source size accepted by /analyze (characters)"
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Root log level")

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    # ── Audit ──
    audit_enabled: bool = Field(
        default=False, description="Feature flag: append one JSON line per API call"
    )
    audit_log_path: str = Field(
        default="audit.jsonl", description="Path to JSON-lines audit log file"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
