"""Test utilities for wren applications.

Provides an async test client that drives the ASGI interface::

    from wren.testing import TestClient
"""

from wren.testing.client import TestClient

__all__ = ["TestClient"]
