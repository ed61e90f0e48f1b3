"""Environment-driven settings for the rewriter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from image_rewrite_api.providers import get_service

from .capabilities import get_capability
from .contracts import RewritePolicy
from .rewriter import RequestRewriter
from .utils import parse_flag


DEFAULT_SERVICE = "thumbor"
DEFAULT_CAPABILITY = "pillow"


@dataclass(frozen=True)
class RewriteSettings:
    host: str
    key: Optional[str] = None
    always_transform: bool = False
    format_capability: str = DEFAULT_CAPABILITY
    service: str = DEFAULT_SERVICE

    def build_rewriter(self, configure: Optional[Callable] = None) -> RequestRewriter:
        policy = RewritePolicy(always_transform=self.always_transform)
        if configure is not None:
            policy = policy.with_configure(configure)
        return RequestRewriter(
            service=get_service(self.service, host=self.host, key=self.key),
            policy=policy,
            capability=get_capability(self.format_capability),
        )


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> RewriteSettings:
    env = os.environ if environ is None else environ
    host = _clean(env.get("THUMBOR_HOST"))
    if not host:
        raise RuntimeError("THUMBOR_HOST must be set to rewrite image requests.")
    try:
        always_transform = parse_flag(env.get("IMAGE_REWRITE_ALWAYS_TRANSFORM"))
    except ValueError as exc:
        raise RuntimeError(f"IMAGE_REWRITE_ALWAYS_TRANSFORM: {exc}") from exc
    return RewriteSettings(
        host=host,
        key=_clean(env.get("THUMBOR_SECURITY_KEY")),
        always_transform=always_transform,
        format_capability=_clean(env.get("IMAGE_REWRITE_FORMAT_CAPABILITY")) or DEFAULT_CAPABILITY,
    )
