"""Named run profiles and their translation to pytest arguments."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swaglabs.config.settings import BrowserName, Settings
from swaglabs.core.exceptions import ConfigurationError
from swaglabs.testing.sharding import parse_shard

DEFAULT_TEST_PATH = "tests/e2e"

_ARTIFACT_MODES: dict[str, tuple[str, str, str]] = {
    # (screenshot, video, tracing)
    "on-failure": ("only-on-failure", "retain-on-failure", "retain-on-failure"),
    "always": ("on", "on", "on"),
    "off": ("off", "off", "off"),
}


class RunProfile(BaseModel):
    """What to run, on which engines, and how wide."""

    model_config = ConfigDict(frozen=True)

    name: str
    browsers: list[BrowserName] = Field(default_factory=lambda: ["chromium"], min_length=1)
    workers: int | Literal["auto"] = "auto"
    tag: str | None = None
    shard: str | None = None
    headed: bool = False
    files: list[str] = Field(default_factory=list)
    # SWAGLABS_* variables the profile sets for the pytest run
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("workers")
    @classmethod
    def validate_workers(cls, v: int | str) -> int | str:
        if isinstance(v, int) and v < 1:
            raise ValueError("workers must be at least 1")
        return v

    @field_validator("shard")
    @classmethod
    def validate_shard(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                parse_shard(v)
            except ConfigurationError as e:
                raise ValueError(str(e)) from e
        return v

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: dict[str, str]) -> dict[str, str]:
        foreign = sorted(key for key in v if not key.startswith("SWAGLABS_"))
        if foreign:
            raise ValueError(f"Profiles may only set SWAGLABS_* variables: {', '.join(foreign)}")
        return v


PROFILES: dict[str, RunProfile] = {
    profile.name: profile
    for profile in (
        RunProfile(name="default", browsers=["chromium", "firefox", "webkit"]),
        RunProfile(name="chromium", browsers=["chromium"]),
        RunProfile(name="firefox", browsers=["firefox"]),
        RunProfile(name="webkit", browsers=["webkit"]),
        RunProfile(name="serial", browsers=["chromium"], workers=1),
        RunProfile(name="smoke", browsers=["chromium"], tag="smoke"),
        RunProfile(
            name="debug",
            browsers=["chromium"],
            workers=1,
            headed=True,
            env={"SWAGLABS_PAUSE_ON_DEBUG": "1"},
        ),
    )
}


def get_profile(name: str) -> RunProfile:
    """
    Raises:
        ConfigurationError: If no profile has that name.
    """
    try:
        return PROFILES[name]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ConfigurationError(f"Unknown profile {name!r} (known: {known})") from None


def build_pytest_args(profile: RunProfile, settings: Settings) -> list[str]:
    """Translate a profile plus settings into a pytest command line."""
    args: list[str] = list(profile.files) or [DEFAULT_TEST_PATH]

    marker = "e2e" if profile.tag is None else f"e2e and {profile.tag}"
    args += ["-m", marker]

    for browser in profile.browsers:
        args += ["--browser", browser]

    # workers=1 still goes through a single xdist worker, so runs stay isolated
    args += ["-n", str(profile.workers)]

    if profile.shard:
        args += ["--shard", profile.shard]
    if profile.headed:
        args.append("--headed")

    artifacts = Path(settings.artifacts_dir)
    screenshot, video, tracing = _ARTIFACT_MODES[settings.artifact_policy]
    args += [
        "--output",
        str(artifacts / "playwright"),
        "--screenshot",
        screenshot,
        "--video",
        video,
        "--tracing",
        tracing,
    ]

    if "html" in settings.reporters:
        args += [f"--html={artifacts / 'report.html'}", "--self-contained-html"]
    if "junit" in settings.reporters:
        args.append(f"--junitxml={artifacts / 'junit.xml'}")
    if "allure" in settings.reporters:
        args.append(f"--alluredir={artifacts / 'allure'}")

    return args
