"""Remote URL builder interfaces."""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class ImageFormat(str, Enum):
    WEBP = "webp"
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"


class ImageUrlBuilder(Protocol):
    """In-progress set of remote operations for one source image.

    Every operation returns the builder so calls can be chained. Invalid
    input raises :class:`~image_rewrite_api.core.errors.URLBuildError`.
    """

    def resize(self, width: int, height: int) -> "ImageUrlBuilder":
        ...

    def fit_in(self) -> "ImageUrlBuilder":
        ...

    def filter(self, *filters: str) -> "ImageUrlBuilder":
        ...

    def request_format(self, image_format: ImageFormat) -> "ImageUrlBuilder":
        ...

    def to_url(self) -> str:
        ...


class RemoteUrlBuilder(Protocol):
    name: str

    def build_image(self, source: str) -> ImageUrlBuilder:
        ...
