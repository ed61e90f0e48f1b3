"""Error types raised while rewriting image requests."""

from __future__ import annotations


class InvalidRequest(ValueError):
    """The caller handed over a request the rewriter cannot work with."""


class URLBuildError(ValueError):
    """The remote URL builder rejected its source or parameters."""
