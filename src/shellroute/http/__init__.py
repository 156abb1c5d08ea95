"""HTTP request and response types, plus content-type resolution."""

from shellroute.http.mime import mime_from_extension
from shellroute.http.request import Request
from shellroute.http.response import Response

__all__ = ["Request", "Response", "mime_from_extension"]
