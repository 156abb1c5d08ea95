"""Per-request dispatch: hook, route resolution, 404 fallback.

The dispatcher owns the single pre-dispatch hook and a reference to the
route table. It never catches errors raised by the hook or a handler;
those propagate to the ASGI server.
"""

import inspect
import logging

from shellroute._internal.invoke import invoke
from shellroute._internal.types import Hook
from shellroute.errors import ConfigurationError
from shellroute.http.request import Request
from shellroute.http.response import Response
from shellroute.routing.table import RouteTable

logger = logging.getLogger("shellroute.server")


def not_found(method: str, path: str) -> Response:
    """The default response for a request no binding matches."""
    return Response(
        body=f"Cannot {method.lower()} {path}",
        status=404,
        content_type="text/html",
    )


def to_response(result: object) -> Response:
    """Coerce a handler return value into a Response.

    ``Response`` passes through; ``str`` and ``bytes`` become a 200 body.
    """
    if isinstance(result, Response):
        return result
    if isinstance(result, (str, bytes)):
        return Response(body=result)
    msg = f"Handler returned {type(result).__name__}; expected Response, str, or bytes"
    raise TypeError(msg)


class Dispatcher:
    """Resolves each request against a route table.

    Only one hook is active at a time: ``use()`` replaces the previous hook
    rather than chaining onto it.

    Usage::

        dispatcher = Dispatcher(table)
        dispatcher.use(lambda request: print(request.path))
        response = await dispatcher.dispatch(request)
    """

    __slots__ = ("_hook", "table")

    def __init__(self, table: RouteTable, hook: Hook | None = None) -> None:
        self.table = table
        self._hook: Hook | None = None
        if hook is not None:
            self.use(hook)

    @property
    def hook(self) -> Hook | None:
        return self._hook

    def use(self, hook: Hook | None) -> None:
        """Install *hook* as the pre-dispatch hook, or clear it with None."""
        if hook is not None:
            if not callable(hook):
                msg = f"Hook is not callable: {hook!r}"
                raise ConfigurationError(msg)
            if inspect.iscoroutinefunction(hook):
                msg = "The pre-dispatch hook must be a plain function; it cannot suspend."
                raise ConfigurationError(msg)
        self._hook = hook

    async def dispatch(self, request: Request) -> Response:
        """Run the hook, then the matching handler or the 404 fallback."""
        if self._hook is not None:
            self._hook(request)

        handler = self.table.resolve(request.path, request.method.upper())
        if handler is None:
            logger.debug("No route for %s %s", request.method, request.path)
            return not_found(request.method, request.path)

        return to_response(await invoke(handler, request))
