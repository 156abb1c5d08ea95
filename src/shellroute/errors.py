"""Shellroute exception hierarchy.

Shared across the route table, static binder, dispatcher, and app so every
module raises and catches the same types.

Errors raised by route handlers or the pre-dispatch hook are deliberately
absent: they propagate to the ASGI server unmodified.
"""

from pathlib import Path


class ShellrouteError(Exception):
    """Base for all shellroute-specific errors."""


class ConfigurationError(ShellrouteError):
    """Raised when setup input is invalid.

    Bad route paths, unknown methods, non-callable handlers, and
    coroutine hooks all land here at registration time.
    """


class DuplicateBindingError(ShellrouteError):
    """A (path, method) binding conflicts with one already in the table.

    Raised synchronously at registration time. The table is left unchanged.
    """

    def __init__(self, path: str, method: str) -> None:
        self.path = path
        self.method = method
        super().__init__(f'Route "{path}" is already bound. (conflicting method: {method})')


class DirectoryReadError(ShellrouteError):
    """A static directory (or an entry in it) could not be enumerated or read."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read {str(self.path)!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
