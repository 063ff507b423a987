# Test utilities module
import pytest
from PIL import Image

from ..errors import ImageDecodeError
from ..utils import decode_image_bytes, file_extension, is_allowed_image_upload
from .conftest import make_image_bytes

ALLOWED = ("jpeg", "jpg", "png", "gif")


class TestDecodeImageBytes:
    """Test decoding of uploaded bytes."""

    @pytest.mark.parametrize("fmt", ["PNG", "JPEG", "GIF"])
    def test_decode_valid(self, fmt):
        image = decode_image_bytes(make_image_bytes(size=(5, 7), fmt=fmt))

        assert isinstance(image, Image.Image)
        assert image.size == (5, 7)

    def test_decode_invalid(self):
        with pytest.raises(ImageDecodeError, match="Failed to decode image"):
            decode_image_bytes(b"invalid_image_data")

    def test_decode_empty(self):
        with pytest.raises(ImageDecodeError, match="empty"):
            decode_image_bytes(b"")

    def test_decode_truncated(self):
        data = make_image_bytes(size=(64, 64), fmt="PNG")

        with pytest.raises(ImageDecodeError):
            decode_image_bytes(data[: len(data) // 2])


class TestUploadValidation:
    """Test the accepted upload types."""

    @pytest.mark.parametrize(
        "filename, content_type",
        [
            ("login.png", "image/png"),
            ("login.JPG", "image/jpeg"),
            ("login.jpeg", "image/jpeg"),
            ("anim.gif", "image/gif"),
        ],
    )
    def test_allowed(self, filename, content_type):
        assert is_allowed_image_upload(filename, content_type, ALLOWED)

    @pytest.mark.parametrize(
        "filename, content_type",
        [
            ("login.png", "text/plain"),
            ("login.txt", "image/png"),
            ("login.webp", "image/webp"),
            ("login", "image/png"),
            (None, "image/png"),
            ("login.png", None),
        ],
    )
    def test_rejected(self, filename, content_type):
        assert not is_allowed_image_upload(filename, content_type, ALLOWED)

    def test_file_extension(self):
        assert file_extension("a/b/Shot.PNG") == "png"
        assert file_extension("noext") == ""
        assert file_extension(None) == ""
