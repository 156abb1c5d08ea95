"""Shared type aliases used across shellroute modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives the Request, returns a Response (or an awaitable of one)
Handler: TypeAlias = Callable[..., Any]

# Pre-dispatch hook: receives the Request, return value ignored, must not suspend
Hook: TypeAlias = Callable[..., None]
