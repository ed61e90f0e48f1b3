"""Thumbor URL builder backed by libthumbor."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from libthumbor import CryptoURL
from libthumbor.url import unsafe_url

from image_rewrite_api.core.errors import URLBuildError
from .base import ImageFormat


HORIZONTAL_ALIGNMENTS = {"left", "center", "right"}
VERTICAL_ALIGNMENTS = {"top", "middle", "bottom"}


def quality(value: int) -> str:
    """Filter string for the output quality, 0-100."""
    if value < 0 or value > 100:
        raise URLBuildError("Quality must be between 0 and 100.")
    return f"quality({value})"


def format_filter(image_format: ImageFormat) -> str:
    return f"format({ImageFormat(image_format).value})"


class Thumbor:
    """A Thumbor server, optionally with a security key for signed URLs."""

    name = "thumbor"

    def __init__(self, host: str, key: Optional[str] = None) -> None:
        if not host or not host.strip():
            raise URLBuildError("Thumbor host must not be empty.")
        if key is not None and not key:
            raise URLBuildError("Security key must not be empty; pass None for unsafe URLs.")
        host = host.strip()
        self.host = host if host.endswith("/") else f"{host}/"
        self.key = key
        self._crypto = CryptoURL(key=key) if key else None

    def build_image(self, source: str) -> "ThumborUrlBuilder":
        if not source or not source.strip():
            raise URLBuildError("Image source must not be empty.")
        return ThumborUrlBuilder(self, source)

    def sign(self, options: Dict[str, Any]) -> str:
        try:
            if self._crypto is None:
                path = unsafe_url(**options)
            else:
                path = self._crypto.generate(**options)
        except (TypeError, ValueError) as exc:
            raise URLBuildError(f"Unable to build Thumbor URL: {exc}") from exc
        return self.host + path.lstrip("/")

    def __repr__(self) -> str:
        signed = "signed" if self.key else "unsafe"
        return f"Thumbor({self.host!r}, {signed})"


class ThumborUrlBuilder:
    """Collects Thumbor operations for one image; ``to_url`` renders them."""

    def __init__(self, thumbor: Thumbor, source: str) -> None:
        self._thumbor = thumbor
        self.source = source
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.fit_in_enabled = False
        self.crop_box: Optional[tuple[int, int, int, int]] = None
        self.halign: Optional[str] = None
        self.valign: Optional[str] = None
        self.smart_enabled = False
        self.trim_enabled = False
        self.filters: List[str] = []

    @property
    def has_resize(self) -> bool:
        return self.width is not None

    def resize(self, width: int, height: int) -> "ThumborUrlBuilder":
        if width < 0:
            raise URLBuildError("Width must be a positive number.")
        if height < 0:
            raise URLBuildError("Height must be a positive number.")
        if width == 0 and height == 0:
            raise URLBuildError("Both width and height must not be zero.")
        self.width = width
        self.height = height
        return self

    def fit_in(self) -> "ThumborUrlBuilder":
        if not self.has_resize:
            raise URLBuildError("Image must be resized first in order to apply 'fit-in'.")
        self.fit_in_enabled = True
        return self

    def crop(self, top: int, left: int, bottom: int, right: int) -> "ThumborUrlBuilder":
        if min(top, left, bottom, right) < 0:
            raise URLBuildError("Crop values must not be negative.")
        if bottom <= top:
            raise URLBuildError("Bottom must be greater than top.")
        if right <= left:
            raise URLBuildError("Right must be greater than left.")
        self.crop_box = (top, left, bottom, right)
        return self

    def align(self, horizontal: str = "center", vertical: str = "middle") -> "ThumborUrlBuilder":
        if not self.has_resize:
            raise URLBuildError("Image must be resized first in order to align.")
        if horizontal not in HORIZONTAL_ALIGNMENTS:
            raise URLBuildError(f"Unknown horizontal alignment '{horizontal}'")
        if vertical not in VERTICAL_ALIGNMENTS:
            raise URLBuildError(f"Unknown vertical alignment '{vertical}'")
        self.halign = horizontal
        self.valign = vertical
        return self

    def smart(self) -> "ThumborUrlBuilder":
        self.smart_enabled = True
        return self

    def trim(self) -> "ThumborUrlBuilder":
        self.trim_enabled = True
        return self

    def filter(self, *filters: str) -> "ThumborUrlBuilder":
        if not filters:
            raise URLBuildError("You must provide at least one filter.")
        for value in filters:
            if not value or not value.strip():
                raise URLBuildError("Filter must not be blank.")
            self.filters.append(value)
        return self

    def request_format(self, image_format: ImageFormat) -> "ThumborUrlBuilder":
        return self.filter(format_filter(image_format))

    def options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"image_url": self.source}
        if self.trim_enabled:
            options["trim"] = True
        if self.crop_box is not None:
            top, left, bottom, right = self.crop_box
            options["crop"] = ((left, top), (right, bottom))
        if self.fit_in_enabled:
            options["fit_in"] = True
        if self.has_resize:
            options["width"] = self.width
            options["height"] = self.height
        if self.halign is not None:
            options["halign"] = self.halign
            options["valign"] = self.valign
        if self.smart_enabled:
            options["smart"] = True
        if self.filters:
            options["filters"] = list(self.filters)
        return options

    def to_url(self) -> str:
        return self._thumbor.sign(self.options())
