"""Server launcher.

Starts a pounce ASGI server with the live shellroute App object. The
network listener, TLS, and HTTP parsing all belong to pounce.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shellroute.app import App


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    reload: bool = False,
    app_path: str | None = None,
) -> None:
    """Start a single-worker pounce server for *app*.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``), but
    the caller has a live ``App``. We use ``pounce.Server`` directly with
    the ASGI callable.

    Args:
        app: ASGI callable (shellroute App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes. Only useful with *app_path*.
        app_path: Optional ``"module:attribute"`` import string so pounce
            can reimport the app on each reload cycle.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload)
    server = Server(config, app, app_path=app_path)
    server.run()
