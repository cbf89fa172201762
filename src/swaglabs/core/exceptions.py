"""SwagLabs E2E exception hierarchy.

Value mismatches in scenarios use the built-in AssertionError; everything
raised by the page layer derives from SwagLabsError.
"""


class SwagLabsError(Exception):
    """Base exception for all suite errors.

    All custom exceptions should inherit from this class so a failing
    test can be traced back to the page layer.
    """

    pass


class NotReadyError(SwagLabsError):
    """Raised when a target never became actionable within the budget.

    Attributes:
        target: Selector or description of what was awaited.
        timeout: Seconds that were available for the wait.

    Example:
        raise NotReadyError('[data-test="login-button"]', timeout=60.0)
    """

    def __init__(self, target: str, timeout: float, detail: str | None = None) -> None:
        self.target = target
        self.timeout = timeout
        message = f"{target} not ready after {timeout:.1f}s"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NavigationError(SwagLabsError):
    """Raised when a page fails to reach the expected URL or state.

    Attributes:
        url: URL or pattern that was expected.

    Example:
        raise NavigationError("/inventory.html", "still on /")
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Navigation to {url} failed: {reason}")


class ConfigurationError(SwagLabsError):
    """Raised when configuration or run options are invalid.

    Example:
        raise ConfigurationError("Shard must look like 3/3, got 'x'")
    """

    pass


class TestDataError(SwagLabsError):
    """Raised when the static test data file is missing or malformed.

    Example:
        raise TestDataError("Unknown user key: admin")
    """

    # Keep pytest from collecting this as a test class
    __test__ = False
