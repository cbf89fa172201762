"""Command line entry point: run the suite with a named profile.

Examples:
  # All engines, parallel
  swaglabs-e2e

  # Smoke subset on chromium
  swaglabs-e2e --profile smoke

  # Serial run of one scenario file
  swaglabs-e2e --profile serial tests/e2e/test_checkout.py

  # Shard 3 of 3 on firefox
  swaglabs-e2e --browser firefox --shard 3/3
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from typing import Any

import pytest
import structlog
from pydantic import ValidationError

from swaglabs.config.logging import configure_logging
from swaglabs.config.settings import Settings
from swaglabs.core.exceptions import ConfigurationError
from swaglabs.profiles import PROFILES, RunProfile, build_pytest_args, get_profile

log = structlog.get_logger(__name__)


def _workers(value: str) -> int | str:
    if value == "auto":
        return value
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"workers must be an integer or 'auto', got {value!r}"
        ) from None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="swaglabs-e2e",
        description="Run the SwagLabs browser suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1],
    )
    parser.add_argument(
        "--profile",
        default="default",
        choices=sorted(PROFILES),
        help="Named run profile (default: default)",
    )
    parser.add_argument(
        "--browser",
        dest="browsers",
        action="append",
        choices=["chromium", "firefox", "webkit"],
        help="Browser engine; repeat for several (overrides the profile)",
    )
    parser.add_argument("--workers", type=_workers, help="Parallel workers, or 'auto'")
    parser.add_argument("--tag", help="Only tests with this marker, e.g. smoke")
    parser.add_argument("--shard", help="Run shard I of N, e.g. 3/3")
    parser.add_argument("--headed", action="store_true", default=None, help="Show the browser")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the pytest command line instead of running it",
    )
    parser.add_argument("files", nargs="*", help="Scenario files to run")
    return parser.parse_args(argv)


def resolve_profile(args: argparse.Namespace) -> RunProfile:
    """Apply command line overrides on top of the named profile."""
    profile = get_profile(args.profile)
    updates: dict[str, Any] = {}
    if args.browsers:
        updates["browsers"] = args.browsers
    if args.workers is not None:
        updates["workers"] = args.workers
    if args.tag is not None:
        updates["tag"] = args.tag
    if args.shard is not None:
        updates["shard"] = args.shard
    if args.headed is not None:
        updates["headed"] = args.headed
    if args.files:
        updates["files"] = args.files
    if not updates:
        return profile
    try:
        return RunProfile.model_validate({**profile.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid run options: {e}") from e


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        profile = resolve_profile(args)
        # pytest runs in this process and its workers inherit the environment
        os.environ.update(profile.env)
        settings = Settings()
        configure_logging(settings)
    except (ConfigurationError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    pytest_args = build_pytest_args(profile, settings)
    if args.dry_run:
        env = [f"{key}={value}" for key, value in sorted(profile.env.items())]
        print(" ".join([*env, "pytest", *pytest_args]))
        return 0

    log.info("run_profile", profile=profile.name, args=pytest_args)
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    sys.exit(main())
