"""Decide whether an image request should be served through a remote image service.

Only remote ``http``/``https`` images are rewritten, and by default only when
the request carries a target size. Operations handed to the remote service
(resize, fit-in) are cleared on the rewritten request so the local pipeline
does not repeat them.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from image_rewrite_api.providers.base import ImageFormat, RemoteUrlBuilder

from .capabilities import FormatCapability, PillowFormatCapability
from .contracts import ImageRequest, RewriteOutcome, RewritePolicy
from .errors import InvalidRequest
from .utils import is_remote_uri, uri_scheme

logger = logging.getLogger(__name__)


def rewrite(
    request: ImageRequest,
    policy: RewritePolicy,
    *,
    service: RemoteUrlBuilder,
    capability: FormatCapability,
) -> RewriteOutcome:
    if request.resource_id is not None:
        # Bundled resources are never fetched remotely.
        return RewriteOutcome.unchanged(request)
    uri = request.uri
    if uri is None:
        raise InvalidRequest("A uri is required when no resource_id is set.")
    if not is_remote_uri(uri):
        logger.debug("Leaving %s unchanged: scheme %r is not remote.", uri, uri_scheme(uri))
        return RewriteOutcome.unchanged(request)
    if not request.has_size() and not policy.always_transform:
        logger.debug("Leaving %s unchanged: no target size.", uri)
        return RewriteOutcome.unchanged(request)

    warnings: List[str] = []
    new_request = request.new_builder()

    url_builder = service.build_image(uri)
    policy.configure(url_builder)

    if request.has_size():
        url_builder.resize(request.target_width, request.target_height)
        new_request.clear_resize()

    if request.center_inside:
        url_builder.fit_in()
        new_request.clear_center_inside()

    if capability.supports_modern_format():
        url_builder.request_format(ImageFormat.WEBP)
    else:
        warnings.append("WebP not requested: format capability reports no support.")

    new_request.set_uri(url_builder.to_url())
    result = new_request.build()
    logger.debug("Rewrote %s -> %s", uri, result.uri)
    return RewriteOutcome.rewritten(request, result, warnings)


class RequestRewriter:
    """Rewrites requests against one remote service with a fixed policy.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        service: RemoteUrlBuilder,
        policy: Optional[RewritePolicy] = None,
        capability: Optional[FormatCapability] = None,
    ) -> None:
        self.service = service
        self.policy = policy or RewritePolicy()
        self.capability = capability or PillowFormatCapability()

    def rewrite(self, request: ImageRequest) -> RewriteOutcome:
        return rewrite(request, self.policy, service=self.service, capability=self.capability)

    def transform_request(self, request: ImageRequest) -> ImageRequest:
        """Return the request to fetch: the rewritten one, or ``request`` itself."""
        return self.rewrite(request).request
