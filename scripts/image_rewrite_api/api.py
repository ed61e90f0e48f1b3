"""Public API for the image request rewriter."""

from __future__ import annotations

import os
from dataclasses import replace
from typing import Callable, Mapping, Optional

from image_rewrite_api.core.config import RewriteSettings, load_settings
from image_rewrite_api.core.contracts import ImageRequest, RewriteOutcome
from image_rewrite_api.core.rewriter import RequestRewriter


def _resolve_settings(
    *,
    host: Optional[str],
    key: Optional[str],
    always_transform: Optional[bool],
    format_capability: Optional[str],
    environ: Optional[Mapping[str, str]],
) -> RewriteSettings:
    env = dict(os.environ if environ is None else environ)
    if host:
        env["THUMBOR_HOST"] = host
    settings = load_settings(env)
    if key is not None:
        settings = replace(settings, key=key)
    if always_transform is not None:
        settings = replace(settings, always_transform=always_transform)
    if format_capability is not None:
        settings = replace(settings, format_capability=format_capability)
    return settings


def rewriter_from_env(
    *,
    configure: Optional[Callable] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RequestRewriter:
    return load_settings(environ).build_rewriter(configure)


def rewrite(
    *,
    uri: Optional[str] = None,
    resource_id: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    center_inside: bool = False,
    center_crop: bool = False,
    host: Optional[str] = None,
    key: Optional[str] = None,
    always_transform: Optional[bool] = None,
    format_capability: Optional[str] = None,
    configure: Optional[Callable] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RewriteOutcome:
    request = ImageRequest(
        uri=uri,
        resource_id=resource_id,
        target_width=width,
        target_height=height,
        center_inside=center_inside,
        center_crop=center_crop,
    )
    settings = _resolve_settings(
        host=host,
        key=key,
        always_transform=always_transform,
        format_capability=format_capability,
        environ=environ,
    )
    return settings.build_rewriter(configure).rewrite(request)
