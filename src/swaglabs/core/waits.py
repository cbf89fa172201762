"""Wait contract for page primitives.

Polling and condition-waiting utilities. Every "when ready" primitive goes
through ``wait_until`` so the bounded timeout, the poll interval and the
actionability predicate are explicit and testable without a browser.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    retry_if_result,
    stop_after_delay,
    wait_fixed,
)

from swaglabs.core.exceptions import NotReadyError

log = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class WaitPolicy:
    """Bounds for a single wait.

    Attributes:
        timeout: Upper bound in seconds for one wait.
        poll_interval: Seconds between two predicate evaluations.
    """

    timeout: float = 60.0
    poll_interval: float = 0.1


class Deadline:
    """Test-wide time budget shared by every wait of one test.

    The clock starts when the deadline is created, so later waits get
    whatever is left rather than a fresh timeout each.
    """

    def __init__(self, budget: float, clock: Callable[[], float] = time.monotonic) -> None:
        if budget <= 0:
            raise ValueError("Deadline budget must be positive")
        self.budget = budget
        self._clock = clock
        self._started = clock()

    def elapsed(self) -> float:
        return self._clock() - self._started

    def remaining(self) -> float:
        return max(0.0, self.budget - self.elapsed())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0

    def bound(self, timeout: float) -> float:
        """Clamp a per-wait timeout to the remaining budget."""
        return min(timeout, self.remaining())


def wait_until(
    predicate: Callable[[], T],
    *,
    description: str,
    policy: WaitPolicy | None = None,
    deadline: Deadline | None = None,
    ignored_exceptions: tuple[type[BaseException], ...] = (),
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Poll a predicate until it returns a truthy value.

    The predicate is always evaluated at least once, even when the budget
    is already spent.

    Args:
        predicate: Function called repeatedly; a truthy result ends the wait
        description: What is being awaited (used in the error)
        policy: Timeout and poll interval for this wait
        deadline: Test-wide budget; the effective timeout never exceeds it
        ignored_exceptions: Exceptions meaning "not ready yet"
        sleep: Sleep function between polls

    Returns:
        The first truthy predicate result

    Raises:
        NotReadyError: If the predicate is still falsy when time runs out

    Example:
        wait_until(
            lambda: locator.is_visible() and locator.is_enabled(),
            description='[data-test="login-button"]',
            policy=WaitPolicy(timeout=5.0),
        )
    """
    policy = policy or WaitPolicy()
    timeout = deadline.bound(policy.timeout) if deadline is not None else policy.timeout

    retry_condition = retry_if_result(lambda result: not result)
    if ignored_exceptions:
        retry_condition = retry_condition | retry_if_exception_type(ignored_exceptions)

    retrying = Retrying(
        stop=stop_after_delay(timeout),
        wait=wait_fixed(policy.poll_interval),
        retry=retry_condition,
        sleep=sleep,
    )

    try:
        return retrying(predicate)
    except RetryError as e:
        attempt = e.last_attempt
        detail = None
        if attempt.failed:
            detail = str(attempt.exception())
        log.warning(
            "wait_timed_out",
            target=description,
            timeout=round(timeout, 3),
            attempts=attempt.attempt_number,
        )
        raise NotReadyError(description, timeout, detail) from None
