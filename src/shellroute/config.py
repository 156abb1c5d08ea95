"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = AppConfig(port=3000, static_dir="public")
    """

    # Server
    host: str = "localhost"
    port: int = 8000
    reload: bool = False  # Restart on file changes (needs an import string)

    # Logging
    log_level: str = "info"

    # Static files (bound when the app freezes; None disables)
    static_dir: str | Path | None = None
    static_url: str = "/"
