# Utility functions for API
import io
from pathlib import PurePath
from typing import Iterable, Optional

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError


def decode_image_bytes(image_bytes: bytes) -> Image.Image:
    """
    Decode raw uploaded bytes into a fully loaded PIL image.

    Args:
        image_bytes: Contents of the uploaded file

    Returns:
        PIL image, first frame for animated formats

    Raises:
        ImageDecodeError: If the bytes are empty or not a readable image
    """
    if not image_bytes:
        raise ImageDecodeError("Failed to decode image: empty upload")

    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeError(f"Failed to decode image: {str(e)}") from e

    return image


def file_extension(filename: Optional[str]) -> str:
    """Lower-case extension without the leading dot, empty when absent."""
    if not filename:
        return ""
    return PurePath(filename).suffix.lower().lstrip(".")


def is_allowed_image_upload(
    filename: Optional[str], content_type: Optional[str], allowed: Iterable[str]
) -> bool:
    """
    Check both the declared MIME type and the file extension.

    A file is accepted only when its content type subtype and its extension
    are each one of the allowed image types.

    Args:
        filename: Original client-side file name
        content_type: MIME type declared by the client
        allowed: Allowed type names, e.g. ("jpeg", "jpg", "png", "gif")

    Returns:
        True if the upload may be analyzed
    """
    allowed = {a.lower() for a in allowed}
    mimetype = (content_type or "").lower()
    if not mimetype.startswith("image/"):
        return False

    subtype = mimetype.split("/", 1)[1].split(";")[0].strip()
    return subtype in allowed and file_extension(filename) in allowed
