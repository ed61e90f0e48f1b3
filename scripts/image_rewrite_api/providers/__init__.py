"""Remote image service registry."""

from __future__ import annotations

from typing import Optional

from .base import ImageFormat, ImageUrlBuilder, RemoteUrlBuilder


def get_service(name: str, *, host: str, key: Optional[str] = None) -> RemoteUrlBuilder:
    key_name = name.strip().lower()
    if key_name == "thumbor":
        from .thumbor import Thumbor
        return Thumbor(host, key)
    raise ValueError(f"No remote image service registered for '{name}'.")


__all__ = ["get_service", "ImageFormat", "ImageUrlBuilder", "RemoteUrlBuilder"]
