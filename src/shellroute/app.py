"""Shellroute application class.

Mutable during setup (route registration, static binding, the hook).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import inspect
import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from shellroute._internal.asgi import Receive, Scope, Send
from shellroute._internal.invoke import invoke
from shellroute._internal.types import Handler, Hook
from shellroute.config import AppConfig
from shellroute.routing.route import Binding, Method
from shellroute.routing.table import RouteTable
from shellroute.server.dispatch import Dispatcher
from shellroute.server.handler import handle_request
from shellroute.static import bind_static

logger = logging.getLogger("shellroute.server")


class App:
    """The shellroute application.

    Mutable during setup (route registration, static binding, the hook).
    Frozen at runtime when ``app.run()`` or ``__call__()`` is first invoked.

    Every method binder works both as a direct call and as a decorator::

        app = App()

        app.get("/health", health)

        @app.post("/items")
        async def create_item(request: Request) -> Response:
            ...

        app.bind_static("public", "/")
        app.run()

    Thread safety:
        Setup is single-threaded. The freeze transition uses a Lock +
        double-check so exactly one thread freezes the route table, even
        when several server workers call ``__call__()`` on first request.
        Registration after the freeze raises ``RuntimeError``.
    """

    __slots__ = (
        "_dispatcher",
        "_freeze_lock",
        "_frozen",
        "_shutdown_hooks",
        "_startup_hooks",
        "_table",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._table = RouteTable()
        self._dispatcher = Dispatcher(self._table)
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def route(
        self,
        path: str,
        method: Method | str,
        handler: Handler | None = None,
    ) -> Any:
        """Bind *handler* to *path* for *method*.

        Returns the handler when called directly, or a decorator when
        *handler* is omitted.

        Raises:
            DuplicateBindingError: The path already has a binding for this
                method, or either side is ``ANY``.
            ConfigurationError: The path does not start with ``/`` or the
                method is not supported.
        """
        if handler is None:

            def decorator(func: Handler) -> Handler:
                return self.route(path, method, func)

            return decorator

        self._check_not_frozen()
        self._table.register(path, method, handler)
        return handler

    def get(self, path: str, handler: Handler | None = None) -> Any:
        """Bind a GET handler."""
        return self.route(path, Method.GET, handler)

    def post(self, path: str, handler: Handler | None = None) -> Any:
        """Bind a POST handler."""
        return self.route(path, Method.POST, handler)

    def put(self, path: str, handler: Handler | None = None) -> Any:
        """Bind a PUT handler."""
        return self.route(path, Method.PUT, handler)

    def delete(self, path: str, handler: Handler | None = None) -> Any:
        """Bind a DELETE handler."""
        return self.route(path, Method.DELETE, handler)

    def options(self, path: str, handler: Handler | None = None) -> Any:
        """Bind an OPTIONS handler."""
        return self.route(path, Method.OPTIONS, handler)

    def any(self, path: str, handler: Handler | None = None) -> Any:
        """Bind a handler for every method on *path*.

        Fails if *path* already has any binding at all.
        """
        return self.route(path, Method.ANY, handler)

    def bind_static(self, directory: str | Path, prefix: str = "/") -> list[Binding]:
        """Read every file under *directory* now and serve each one via GET.

        ``<directory>/css/site.css`` becomes ``<prefix>/css/site.css`` and
        any ``index.html`` is served at its folder's route.

        Raises:
            DirectoryReadError: The tree (or a file in it) can't be read.
            DuplicateBindingError: A derived route is already bound. None
                of the directory's routes are registered in that case.
        """
        self._check_not_frozen()
        return bind_static(self._table, directory, prefix)

    # -- Hook --

    def use(self, hook: Hook | None) -> None:
        """Install the pre-dispatch hook, replacing any previous one.

        The hook runs synchronously before routing for every request,
        matched or not. Its return value is ignored.
        """
        self._check_not_frozen()
        self._dispatcher.use(hook)

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def routes(self) -> RouteTable:
        """The route table (read-only once the app is frozen)."""
        return self._table

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    # -- Serving --

    def listen(self, callback: Callable[..., Any] | None = None) -> None:
        """Serve on the configured host and port.

        *callback* runs once, after lifespan startup completes.
        """
        if callback is not None:
            self.on_startup(callback)
        self.run()

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and start the pounce server.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        from shellroute.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.reload,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan directly, then delegates HTTP scopes to the
        dispatcher. Other scope types (websocket) are ignored.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, dispatcher=self._dispatcher)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup (before the first HTTP request), runs
        registered startup/shutdown hooks, and signals completion back to
        the server.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    for hook in self._startup_hooks:
                        await invoke(hook)
                except Exception as exc:
                    logger.exception("Startup failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                for hook in self._shutdown_hooks:
                    await invoke(hook)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Bind the configured static directory and freeze the table.

        MUST only be called while holding _freeze_lock.
        """
        if self.config.static_dir is not None:
            bind_static(self._table, self.config.static_dir, self.config.static_url)
        self._table.freeze()
        self._frozen = True
        logger.debug("App frozen with %d route(s)", len(self._table))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, static directories, and the hook before calling app.run()."
            )
            raise RuntimeError(msg)
