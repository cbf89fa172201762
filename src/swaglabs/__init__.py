"""SwagLabs E2E - Page Object Model browser suite for the Swag Labs demo shop."""

__version__ = "1.0.0"
