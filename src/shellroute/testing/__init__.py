"""Test utilities for shellroute applications::

    from shellroute.testing import TestClient
"""

from shellroute.testing.client import TestClient

__all__ = ["TestClient"]
