"""HTTP response payload with chainable .with_*() transformation API.

Each transformation returns a new Response. Handlers build one, the
dispatcher passes it through, and the ASGI sender writes it out.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response payload: optional body, status, and headers.

    ``content_type`` is kept separate from the other headers so the
    static binder and the 404 fallback can set it without string
    juggling; ``header_map`` folds it back in as ``Content-Type``.
    """

    body: str | bytes | None = None
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    # -- Accessors --

    @property
    def header_map(self) -> dict[str, str]:
        """Headers as a string-keyed map, ``Content-Type`` included when set.

        Header names compare case-insensitively: a later header replaces an
        earlier one of the same name and keeps its own spelling.
        """
        result: dict[str, str] = {}
        keys: dict[str, str] = {}
        pairs = list(self.headers)
        if self.content_type is not None:
            pairs.insert(0, ("Content-Type", self.content_type))
        for name, value in pairs:
            previous = keys.get(name.lower())
            if previous is not None:
                del result[previous]
            keys[name.lower()] = name
            result[name] = value
        return result

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes (empty when there is no body)."""
        if self.body is None:
            return b""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body_bytes.decode("utf-8")
