"""Core data contracts for the image request rewriter."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable, Literal, Optional, Sequence

from .errors import InvalidRequest

if TYPE_CHECKING:
    from image_rewrite_api.providers.base import ImageUrlBuilder


OutcomeType = Literal["unchanged", "rewritten"]


@dataclass(frozen=True)
class ImageRequest:
    """A wanted image fetch, as handed over by the loading pipeline.

    ``resource_id`` marks bundled/local content. ``target_width`` and
    ``target_height`` are either both set or both unset.
    """

    uri: Optional[str] = None
    resource_id: Optional[int] = None
    target_width: Optional[int] = None
    target_height: Optional[int] = None
    center_inside: bool = False
    center_crop: bool = False

    def __post_init__(self) -> None:
        if (self.target_width is None) != (self.target_height is None):
            raise InvalidRequest("target_width and target_height must be set together.")
        for name in ("target_width", "target_height"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise InvalidRequest(f"{name} must be an integer, got {value!r}")
        if self.target_width is not None and (self.target_width < 0 or self.target_height < 0):
            raise InvalidRequest(
                f"Target size must not be negative: {self.target_width}x{self.target_height}"
            )
        if self.center_inside and self.center_crop:
            raise InvalidRequest("center_crop and center_inside are mutually exclusive.")

    def has_size(self) -> bool:
        if self.target_width is None or self.target_height is None:
            return False
        return self.target_width != 0 or self.target_height != 0

    def new_builder(self) -> "RequestBuilder":
        return RequestBuilder(
            uri=self.uri,
            resource_id=self.resource_id,
            target_width=self.target_width,
            target_height=self.target_height,
            center_inside=self.center_inside,
            center_crop=self.center_crop,
        )


@dataclass
class RequestBuilder:
    """Mutable copy of an :class:`ImageRequest`, scoped to a single rewrite."""

    uri: Optional[str] = None
    resource_id: Optional[int] = None
    target_width: Optional[int] = None
    target_height: Optional[int] = None
    center_inside: bool = False
    center_crop: bool = False

    def clear_resize(self) -> "RequestBuilder":
        # Crop and fit-in only make sense against a target size.
        self.target_width = None
        self.target_height = None
        self.center_crop = False
        self.center_inside = False
        return self

    def clear_center_inside(self) -> "RequestBuilder":
        self.center_inside = False
        return self

    def set_uri(self, uri: str) -> "RequestBuilder":
        if not uri:
            raise InvalidRequest("Rewritten uri must not be empty.")
        self.uri = uri
        return self

    def build(self) -> ImageRequest:
        return ImageRequest(
            uri=self.uri,
            resource_id=self.resource_id,
            target_width=self.target_width,
            target_height=self.target_height,
            center_inside=self.center_inside,
            center_crop=self.center_crop,
        )


def _no_configure(builder: "ImageUrlBuilder") -> None:
    return None


@dataclass(frozen=True)
class RewritePolicy:
    always_transform: bool = False
    configure: Callable[["ImageUrlBuilder"], None] = _no_configure

    def with_configure(self, configure: Callable[["ImageUrlBuilder"], None]) -> "RewritePolicy":
        return replace(self, configure=configure)


@dataclass(frozen=True)
class RewriteOutcome:
    type: OutcomeType
    request: ImageRequest
    original: ImageRequest
    warnings: Sequence[str] = field(default_factory=tuple)

    @classmethod
    def unchanged(cls, request: ImageRequest) -> "RewriteOutcome":
        return cls(type="unchanged", request=request, original=request)

    @classmethod
    def rewritten(
        cls,
        original: ImageRequest,
        request: ImageRequest,
        warnings: Sequence[str] = (),
    ) -> "RewriteOutcome":
        return cls(type="rewritten", request=request, original=original, warnings=tuple(warnings))

    @property
    def is_rewritten(self) -> bool:
        return self.type == "rewritten"
