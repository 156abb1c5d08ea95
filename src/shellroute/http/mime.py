"""Extension to content-type resolution for static assets.

A fixed table covering common text, image, audio, video, archive, and font
formats. Lookups are case-sensitive and take the extension without its
leading dot (``"png"``, not ``".png"``).
"""

import logging

logger = logging.getLogger("shellroute.static")

DEFAULT_CONTENT_TYPE = "text/plain"

CONTENT_TYPES: dict[str, str] = {
    # text/
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "text/javascript",
    "mjs": "text/javascript",
    "txt": "text/plain",
    # image/
    "svg": "image/svg+xml",
    "apng": "image/apng",
    "png": "image/png",
    "gif": "image/gif",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "ico": "image/vnd.microsoft.icon",
    # video/
    "mp4": "video/mp4",
    "mpeg": "video/mpeg",
    "ogv": "video/ogg",
    # audio/
    "mp3": "audio/mpeg",
    "oga": "audio/ogg",
    # application/
    "json": "application/json",
    "xml": "application/xml",
    "zip": "application/zip",
    "7z": "application/x-7z-compressed",
    "rar": "application/vnd.rar",
    "tar": "application/x-tar",
    "gz": "application/gzip",
    "php": "application/x-httpd-php",
    "pdf": "application/pdf",
    "sh": "application/x-sh",
    # font/
    "otf": "font/otf",
    "ttf": "font/ttf",
}


def mime_from_extension(extension: str) -> str:
    """Return the content type for *extension*.

    Unknown extensions fall back to ``text/plain`` and log a warning naming
    the extension. A file without an extension (``""``) also gets
    ``text/plain``, logged at debug level only.
    """
    content_type = CONTENT_TYPES.get(extension)
    if content_type is not None:
        return content_type
    if extension:
        logger.warning(
            "Unknown extension .%s while binding static routes; serving as %s",
            extension,
            DEFAULT_CONTENT_TYPE,
        )
    else:
        logger.debug("No extension; serving as %s", DEFAULT_CONTENT_TYPE)
    return DEFAULT_CONTENT_TYPE
