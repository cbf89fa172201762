"""Core building blocks: exceptions and the wait contract."""

from swaglabs.core.exceptions import (
    ConfigurationError,
    NavigationError,
    NotReadyError,
    SwagLabsError,
    TestDataError,
)
from swaglabs.core.waits import Deadline, WaitPolicy, wait_until

__all__ = [
    "ConfigurationError",
    "Deadline",
    "NavigationError",
    "NotReadyError",
    "SwagLabsError",
    "TestDataError",
    "WaitPolicy",
    "wait_until",
]
