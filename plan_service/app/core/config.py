"""
Artifact: plan_service/app/core/config.py
Purpose: Centralizes environment loading and Gemini relay configuration values.
Created: 2026-10-19
Revised:
- 2026-10-19: Added Gemini endpoint, auth mode, and timeout accessors.
Preconditions:
- Environment variables may be present in process env and optional .env file.
Inputs:
- Acceptable: String environment variables such as GEMINI_API_KEY and GEMINI_TIMEOUT_SECONDS.
- Unacceptable: Non-numeric GEMINI_TIMEOUT_SECONDS or auth modes other than query/bearer.
Postconditions:
- Dotenv variables are loaded and configuration accessors are available to callers.
Returns:
- Settings object with service title and helper accessors.
Errors/Exceptions:
- ValueError for an unsupported GEMINI_AUTH_MODE or a malformed timeout value.
"""

import os

from dotenv import load_dotenv


load_dotenv()

AUTH_MODES = ("query", "bearer")


class Settings:
    """Application-level configuration values."""

    app_title: str = "Study Plan Relay Service"

    @staticmethod
    def gemini_api_key() -> str:
        return os.getenv("GEMINI_API_KEY", "")

    @staticmethod
    def gemini_model() -> str:
        return os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

    @staticmethod
    def gemini_api_base() -> str:
        return os.getenv(
            "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta"
        ).rstrip("/")

    def gemini_endpoint(self) -> str:
        return f"{self.gemini_api_base()}/models/{self.gemini_model()}:generateContent"

    @staticmethod
    def gemini_auth_mode() -> str:
        mode = os.getenv("GEMINI_AUTH_MODE", "query").strip().lower()
        if mode not in AUTH_MODES:
            raise ValueError(f"GEMINI_AUTH_MODE must be one of {AUTH_MODES}, got {mode!r}")
        return mode

    @staticmethod
    def gemini_timeout_seconds() -> float:
        return float(os.getenv("GEMINI_TIMEOUT_SECONDS", "30"))

    @staticmethod
    def log_level() -> str:
        return os.getenv("LOG_LEVEL", "DEBUG").upper()


settings = Settings()
