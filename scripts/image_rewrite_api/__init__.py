"""Rewrite image requests to use a remote image service."""

from .api import rewrite, rewriter_from_env
from .core import ImageRequest, InvalidRequest, RewriteOutcome, RewritePolicy, URLBuildError
from .core.rewriter import RequestRewriter

__all__ = [
    "rewrite",
    "rewriter_from_env",
    "ImageRequest",
    "InvalidRequest",
    "RequestRewriter",
    "RewriteOutcome",
    "RewritePolicy",
    "URLBuildError",
]
