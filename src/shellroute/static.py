"""Static asset binding.

Walks a directory tree once at setup, reads every file, and registers a GET
route per file whose handler returns the captured bytes. Nothing is read
from disk after binding.

Route names mirror the tree under the prefix, extension included::

    static/
        index.html        ->  /site
        css/main.css      ->  /site/css/main.css
        docs/index.html   ->  /site/docs

(for ``bind_static(table, "static", "/site")``). Only ``index.html`` folds
up to its parent route.
"""

import logging
import posixpath
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from shellroute.errors import DirectoryReadError
from shellroute.http.mime import mime_from_extension
from shellroute.http.request import Request
from shellroute.http.response import Response
from shellroute.routing.route import Binding, Method
from shellroute.routing.table import RouteTable

logger = logging.getLogger("shellroute.static")

INDEX_NAME = "index"
INDEX_EXTENSION = "html"


@dataclass(frozen=True, slots=True)
class StaticFileEntry:
    """A file discovered during the walk. Consumed by registration."""

    source: Path
    route: str
    content: bytes
    content_type: str


def split_filename(filename: str) -> tuple[str, str]:
    """Split *filename* on its last dot into ``(name, extension)``.

    A name without a dot has no extension::

        split_filename("app.min.js") -> ("app.min", "js")
        split_filename("LICENSE")    -> ("LICENSE", "")
    """
    name, dot, extension = filename.rpartition(".")
    if not dot:
        return filename, ""
    return name, extension


def normalize_prefix(prefix: str) -> str:
    """Forward slashes, leading slash, no trailing slash (except for root)."""
    cleaned = prefix.replace("\\", "/").strip("/")
    return "/" + cleaned if cleaned else "/"


def route_for(parent_route: str, filename: str) -> str:
    """Derive the route for *filename* inside the directory bound at *parent_route*."""
    name, extension = split_filename(filename)
    if name == INDEX_NAME and extension == INDEX_EXTENSION:
        return parent_route
    return posixpath.join(parent_route, filename)


def discover_static(directory: str | Path, prefix: str = "/") -> list[StaticFileEntry]:
    """Walk *directory* and return one entry per file, in sorted walk order.

    Raises ``DirectoryReadError`` when the root, a subdirectory, or a file
    cannot be read, when an entry is neither a directory nor a regular
    file, or when symlinked directories form a cycle.
    """
    root = Path(directory)
    if not root.is_dir():
        reason = "not a directory" if root.exists() else "no such directory"
        raise DirectoryReadError(root, reason)

    entries: list[StaticFileEntry] = []
    _walk(root, normalize_prefix(prefix), entries, visiting=set())
    return entries


def _walk(
    directory: Path,
    route: str,
    entries: list[StaticFileEntry],
    visiting: set[Path],
) -> None:
    real = directory.resolve()
    if real in visiting:
        raise DirectoryReadError(directory, "symlink cycle")
    visiting.add(real)

    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise DirectoryReadError(directory, exc.strerror or str(exc)) from exc

    for child in children:
        child_route = posixpath.join(route, child.name)
        if child.is_dir():
            _walk(child, child_route, entries, visiting)
        elif child.is_file():
            entries.append(_read_entry(child, route))
        elif not child.exists():
            raise DirectoryReadError(child, "broken symlink")
        else:
            raise DirectoryReadError(child, "not a regular file")

    visiting.discard(real)


def _read_entry(path: Path, parent_route: str) -> StaticFileEntry:
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise DirectoryReadError(path, exc.strerror or str(exc)) from exc
    _, extension = split_filename(path.name)
    return StaticFileEntry(
        source=path,
        route=route_for(parent_route, path.name),
        content=content,
        content_type=mime_from_extension(extension),
    )


def make_static_handler(
    content: bytes, content_type: str
) -> Callable[[Request], Awaitable[Response]]:
    """Build a handler that ignores the request and returns *content*."""
    response = Response(body=content, status=200, content_type=content_type)

    async def serve_static(request: Request) -> Response:
        return response

    return serve_static


def bind_static(table: RouteTable, directory: str | Path, prefix: str = "/") -> list[Binding]:
    """Register a GET binding for every file under *directory*.

    All files are discovered and read first, then registered as one batch,
    so a duplicate route (from ``index.html`` folding, overlapping trees, or
    an existing binding) raises ``DuplicateBindingError`` without adding
    any of this call's routes.
    """
    entries = discover_static(directory, prefix)
    bindings = [
        Binding(
            path=entry.route,
            method=Method.GET,
            handler=make_static_handler(entry.content, entry.content_type),
        )
        for entry in entries
    ]
    table.register_many(bindings)

    for entry in entries:
        logger.debug("Static %s -> %s (%s)", entry.source, entry.route, entry.content_type)
    logger.info(
        "Bound %d static file(s) from %s under %s",
        len(entries),
        directory,
        normalize_prefix(prefix),
    )
    return bindings
