"""
Error classes for Scout analytics.

Hierarchy:
    ScoutError
    └── InvalidArgumentError

Degenerate data (no deals in range, no won deals, no valued deals) is
never an error; calculators return their documented defaults instead.
"""


class ScoutError(Exception):
    """Base exception for all Scout errors."""

    def __init__(self, message: str, code: str = "UNKNOWN", details: dict = None):
        self.code = code
        self.details = details or {}
        super().__init__(f"[{code}] {message}")


class InvalidArgumentError(ScoutError, ValueError):
    """A caller passed an argument outside the function's contract."""

    def __init__(self, message: str, argument: str = None, value=None):
        self.argument = argument
        self.value = value
        super().__init__(
            message,
            code="INVALID_ARGUMENT",
            details={"argument": argument, "value": value},
        )
