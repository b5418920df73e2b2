"""Failure types raised by the remote catalog source."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for remote catalog failures."""


class NetworkError(CatalogError):
    """Transport failure: connection error, timeout or bad HTTP status."""


class ParseError(CatalogError):
    """The response body did not have the expected shape."""
