"""Shared fixtures: a small static site on disk."""

from pathlib import Path

import pytest


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A static tree with nested folders, index files, and an odd extension.

    site/
        index.html
        about.html
        data.xyz
        LICENSE
        css/main.css
        img/logo.png
        docs/index.html
        docs/guide.txt
    """
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("<h1>Home</h1>")
    (site / "about.html").write_text("<h1>About</h1>")
    (site / "data.xyz").write_text("mystery")
    (site / "LICENSE").write_text("MIT")

    css = site / "css"
    css.mkdir()
    (css / "main.css").write_text("h1 { font-size: 2em; }")

    img = site / "img"
    img.mkdir()
    (img / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x01")

    docs = site / "docs"
    docs.mkdir()
    (docs / "index.html").write_text("<h1>Docs</h1>")
    (docs / "guide.txt").write_text("read me")

    return site
