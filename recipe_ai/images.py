"""
Image reference helpers.

Recipe images are either data URIs produced by the provider, http(s) URLs, or
empty. These helpers turn a reference into something the UI can display and
fall back to a fixed placeholder when that is not possible. Fallbacks are
local to the view; they are never reported to the controller.
"""

import base64
import binascii
import logging
from typing import Union

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = (
    "https://images.unsplash.com/photo-1546069901-ba9599a7e63c"
    "?q=80&w=2080&auto=format&fit=crop"
)


def decode_data_uri(image_url: str) -> bytes:
    """
    Decode a base64 data URI into raw bytes.

    Raises:
        ValueError: If the reference is not a base64 data URI or does not decode
    """
    if not image_url.startswith("data:"):
        raise ValueError("not a data URI")
    header, sep, payload = image_url.partition(",")
    if not sep or ";base64" not in header:
        raise ValueError("data URI is not base64 encoded")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"invalid base64 payload: {e}") from e
    if not data:
        raise ValueError("empty image payload")
    return data


def resolve_image(image_url: str) -> Union[bytes, str]:
    """
    Return displayable image content for a reference.

    Returns:
        Decoded bytes for a data URI, the URL itself for http(s), and
        PLACEHOLDER_IMAGE for empty or unusable references
    """
    if not image_url:
        return PLACEHOLDER_IMAGE
    if image_url.startswith(("http://", "https://")):
        return image_url
    try:
        return decode_data_uri(image_url)
    except ValueError as e:
        logger.debug("Unusable image reference, using placeholder: %s", e)
        return PLACEHOLDER_IMAGE


def needs_regeneration(image_url: str, load_failed: bool = False) -> bool:
    """The detail view offers regeneration when there is no image or it failed to load."""
    return load_failed or resolve_image(image_url) == PLACEHOLDER_IMAGE
