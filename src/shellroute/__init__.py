"""Shellroute — a minimal HTTP routing shell for ASGI servers.

An ordered table of path+method bindings, one global pre-dispatch hook,
a plain-text 404 fallback, and static asset binding from a directory tree.

Basic usage::

    from shellroute import App, Response

    app = App()

    @app.get("/")
    async def index(request):
        return Response(body="Hello, World!", content_type="text/html")

    app.bind_static("public", "/assets")
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "Binding",
    "ConfigurationError",
    "DirectoryReadError",
    "DuplicateBindingError",
    "Method",
    "Request",
    "Response",
    "RouteTable",
    "ShellrouteError",
    "mime_from_extension",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import shellroute`` fast while providing a flat top-level API.
    """
    if name == "App":
        from shellroute.app import App

        return App

    if name == "AppConfig":
        from shellroute.config import AppConfig

        return AppConfig

    if name in ("Request", "Response", "mime_from_extension"):
        from shellroute import http as _http

        return getattr(_http, name)

    if name in ("Binding", "Method", "RouteTable"):
        from shellroute import routing as _routing

        return getattr(_routing, name)

    if name in (
        "ConfigurationError",
        "DirectoryReadError",
        "DuplicateBindingError",
        "ShellrouteError",
    ):
        from shellroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
