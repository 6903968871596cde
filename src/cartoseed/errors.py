"""Exception types raised by cartoseed.

Both concrete errors subclass :class:`ValueError` so callers that only care
about "bad input" can keep catching that.
"""

from __future__ import annotations

__all__ = ["CartoseedError", "InvalidDomain", "InvalidParameter"]


class CartoseedError(Exception):
    """Base class for all cartoseed errors."""


class InvalidDomain(CartoseedError, ValueError):
    """The sampling domain is empty, degenerate or not polygonal."""


class InvalidParameter(CartoseedError, ValueError):
    """A sampling parameter is out of range."""
