"""Method enumeration and the frozen Binding record."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from shellroute.errors import ConfigurationError


class Method(StrEnum):
    """HTTP methods a binding can be registered for.

    ``ANY`` is a wildcard: it matches every request method for its path.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    ANY = "ANY"

    @classmethod
    def parse(cls, value: str) -> Method:
        """Look up a method by name, case-insensitively."""
        try:
            return cls(value.upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            msg = f"Unsupported method {value!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg) from None


@dataclass(frozen=True, slots=True)
class Binding:
    """A registered (path, method, handler) triple.

    Created at registration, never mutated, discarded with its table.
    """

    path: str
    method: Method
    handler: Callable[..., Any]

    def matches(self, path: str, method: str) -> bool:
        """True if this binding serves *method* requests for *path*."""
        return self.path == path and (self.method == method or self.method is Method.ANY)

    def conflicts_with(self, other: Binding) -> bool:
        """True if both bindings could never coexist in one table."""
        if self.path != other.path:
            return False
        if Method.ANY in (self.method, other.method):
            return True
        return self.method == other.method
