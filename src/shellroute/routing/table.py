"""Insertion-ordered route table with first-match lookup.

Routes are registered during setup and frozen when the app starts
serving. Lookup is a linear scan in insertion order: the first binding whose
path is exactly equal and whose method is equal or ``ANY`` wins.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from shellroute.errors import ConfigurationError, DuplicateBindingError
from shellroute.routing.route import Binding, Method

logger = logging.getLogger("shellroute.routing")


class RouteTable:
    """Ordered collection of bindings.

    Invariant: a path has either one binding per concrete method and no
    ``ANY`` binding, or exactly one ``ANY`` binding and nothing else.
    Registration that would break this raises ``DuplicateBindingError``
    and leaves the table unchanged.

    Usage::

        table = RouteTable()
        table.register("/users", "GET", list_users)
        table.register("/users", "POST", create_user)
        table.freeze()
        handler = table.resolve("/users", "GET")
    """

    __slots__ = ("_bindings", "_frozen")

    def __init__(self) -> None:
        self._bindings: list[Binding] = []
        self._frozen = False

    # -- Registration --

    def register(
        self,
        path: str,
        method: Method | str,
        handler: Callable[..., Any],
    ) -> Binding:
        """Append a new binding. Must be called before freeze()."""
        binding = make_binding(path, method, handler)
        self.register_many([binding])
        return binding

    def register_many(self, bindings: Iterable[Binding]) -> None:
        """Append a batch of bindings atomically.

        Every binding is checked against the table and against the earlier
        members of the batch before any is appended. The first conflict in
        batch order raises and nothing from the batch is kept.
        """
        self._check_not_frozen()
        batch = list(bindings)
        accepted: list[Binding] = []
        for binding in batch:
            self._check_conflicts(binding, self._bindings)
            self._check_conflicts(binding, accepted)
            accepted.append(binding)
        self._bindings.extend(accepted)
        for binding in accepted:
            logger.debug("Bound %s %s", binding.method, binding.path)

    @staticmethod
    def _check_conflicts(binding: Binding, existing: Iterable[Binding]) -> None:
        for other in existing:
            if other.conflicts_with(binding):
                raise DuplicateBindingError(binding.path, binding.method.value)

    # -- Lookup --

    def resolve(self, path: str, method: str) -> Callable[..., Any] | None:
        """Return the handler of the first matching binding, or None.

        Exact string equality only: no trailing-slash normalisation, no
        case folding, no path parameters.
        """
        for binding in self._bindings:
            if binding.matches(path, method):
                return binding.handler
        return None

    # -- Lifecycle --

    def freeze(self) -> None:
        """Reject any further registration."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot register routes after the app has started serving requests. "
                "Register routes and static directories before calling app.run()."
            )
            raise RuntimeError(msg)

    # -- Introspection --

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """All bindings in insertion order."""
        return tuple(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(tuple(self._bindings))

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        path, method = item
        return any(b.path == path and b.method == method for b in self._bindings)


def make_binding(path: str, method: Method | str, handler: Callable[..., Any]) -> Binding:
    """Validate registration input and build a Binding."""
    if not isinstance(path, str) or not path.startswith("/"):
        msg = f"Route path must start with '/': {path!r}"
        raise ConfigurationError(msg)
    if not callable(handler):
        msg = f"Handler for {path!r} is not callable: {handler!r}"
        raise ConfigurationError(msg)
    if not isinstance(method, Method):
        method = Method.parse(method)
    return Binding(path=path, method=method, handler=handler)
