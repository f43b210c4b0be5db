"""
FlowBoard Backend: Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       coerces types and provides a singleton `settings` object.
Who:   Imported by the app factory, the SMTP dispatcher and the fallback route.
When:  Loaded once at module import time; checked for risky values at startup.

Recognized environment variables:
    PORT, HOST                      → listen address (default 0.0.0.0:3000)
    SMTP_HOST, SMTP_PORT            → mail relay (default smtp.gmail.com:587, STARTTLS)
    SMTP_USER, SMTP_PASS            → relay credentials; SMTP_USER is also the sender
    NOTIFICATION_EMAIL              → operator inbox for contact-form notifications
    CORS_ORIGINS                    → comma-separated allowed origins (default "*")
    STATIC_ROOT                     → directory holding the single-page app
    LOG_LEVEL                       → DEBUG, INFO, WARNING, ERROR, CRITICAL
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development. The SMTP
    credentials and NOTIFICATION_EMAIL must be provided for a real deployment;
    see configuration_warnings().
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # ── SMTP Relay ────────────────────────────────────────────────────────
    # Plain connection upgraded with STARTTLS when the relay offers it.
    # Implicit TLS (SMTPS on 465) is not supported.
    smtp_host: str = Field(default="smtp.gmail.com")
    smtp_port: int = Field(default=587, ge=1, le=65535)
    smtp_user: str = Field(default="", description="Relay login and From address")
    smtp_pass: str = Field(default="", description="Relay password")

    # Empty means contact notifications go to the submitter's own address.
    notification_email: str = Field(default="")

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Static Site ───────────────────────────────────────────────────────
    static_root: str = Field(default="./public")

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    def configuration_warnings(self) -> List[str]:
        """
        What:  Lists legal-but-risky settings worth flagging in the startup log.
        When:  Called during app startup (lifespan).
        How:   Never raises; the service still starts so health checks and
               lead capture keep working while email is misconfigured.
        """
        warnings = []
        if not self.smtp_user or not self.smtp_pass:
            warnings.append(
                "SMTP_USER/SMTP_PASS are not set. The relay will be used without "
                "authentication and most providers will reject the mail."
            )
        if not self.notification_email:
            warnings.append(
                "NOTIFICATION_EMAIL is not set. Contact-form notifications will be "
                "sent to the submitter's own address."
            )
        return warnings


# Singleton instance, imported throughout the application
settings = Settings()
