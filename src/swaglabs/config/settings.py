"""Suite settings using pydantic-settings."""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal
from urllib.parse import urljoin

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BrowserName = Literal["chromium", "firefox", "webkit"]
ReporterName = Literal["html", "junit", "allure"]


class BrowserOverride(BaseModel):
    """Launch options that replace the defaults for one browser engine."""

    slow_mo_ms: int | None = Field(default=None, ge=0)
    headless: bool | None = None


def _default_overrides() -> dict[str, BrowserOverride]:
    return {
        "firefox": BrowserOverride(slow_mo_ms=100),
        "webkit": BrowserOverride(headless=True),
    }


class Settings(BaseSettings):
    """SwagLabs E2E configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWAGLABS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Target application
    base_url: str = Field(
        default="https://www.saucedemo.com", description="Application under test"
    )

    # Waiting
    default_timeout_ms: int = Field(
        default=60_000, ge=1_000, description="Per-test budget for all waits"
    )
    poll_interval_ms: int = Field(
        default=100, ge=10, le=5_000, description="Actionability poll interval"
    )

    # Browser
    viewport_width: int = Field(default=1720, ge=320)
    viewport_height: int = Field(default=850, ge=240)
    headless: bool = Field(default=True, description="Run browsers headless")
    slow_mo_ms: int = Field(default=0, ge=0, description="Delay between actions")
    browser_overrides: dict[str, BrowserOverride] = Field(
        default_factory=_default_overrides,
        description="Per-engine launch overrides keyed by browser name",
    )
    pause_on_debug: bool = Field(
        default=False, description="Open the Playwright inspector on pause_for_inspection()"
    )

    # Run policy
    retries: Literal[0] = Field(default=0, description="Failed tests are never re-run")
    reporters: list[ReporterName] = Field(default_factory=lambda: ["html", "junit", "allure"])
    artifacts_dir: Path = Field(default=Path("test-results"))
    artifact_policy: Literal["on-failure", "always", "off"] = Field(default="on-failure")

    # Data
    test_data_path: Path | None = Field(
        default=None, description="Test data JSON file, packaged file when unset"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_json: bool = Field(default=False, description="Render log lines as JSON")

    ci: bool = Field(
        default=False,
        validation_alias=AliasChoices("SWAGLABS_CI", "CI"),
        description="Running under continuous integration",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("browser_overrides")
    @classmethod
    def validate_override_keys(
        cls, v: dict[str, BrowserOverride]
    ) -> dict[str, BrowserOverride]:
        """Overrides may only target known engines."""
        unknown = set(v) - {"chromium", "firefox", "webkit"}
        if unknown:
            raise ValueError(f"Unknown browser override(s): {', '.join(sorted(unknown))}")
        return v

    @property
    def default_timeout_seconds(self) -> float:
        return self.default_timeout_ms / 1000

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000

    def resolve_url(self, path: str) -> str:
        """Join a relative application path to the base URL."""
        if path.startswith(("http://", "https://")):
            return path
        return urljoin(f"{self.base_url}/", path.lstrip("/"))

    def launch_args_for(
        self, browser_name: str, requested: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Build Playwright launch arguments for one browser engine.

        Precedence, lowest first: global settings, ``requested`` (command
        line flags such as --headed), per-engine overrides.
        """
        args: dict[str, Any] = {"headless": self.headless, "slow_mo": self.slow_mo_ms}
        args.update(requested or {})
        override = self.browser_overrides.get(browser_name)
        if override is not None:
            if override.headless is not None:
                args["headless"] = override.headless
            if override.slow_mo_ms is not None:
                args["slow_mo"] = override.slow_mo_ms
        return args

    def context_args(self) -> dict[str, Any]:
        """Build Playwright browser context arguments."""
        return {
            "base_url": self.base_url,
            "viewport": {"width": self.viewport_width, "height": self.viewport_height},
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
