"""Core contracts and helpers."""

from .contracts import ImageRequest, RequestBuilder, RewriteOutcome, RewritePolicy
from .errors import InvalidRequest, URLBuildError

__all__ = [
    "ImageRequest",
    "InvalidRequest",
    "RequestBuilder",
    "RewriteOutcome",
    "RewritePolicy",
    "URLBuildError",
]
