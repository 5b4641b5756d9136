import io

import pytest
from PIL import Image

from stylelog.imaging.normalize import ImageRejected, normalize_photo


def _png(size=(400, 200), mode="RGBA") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, (200, 30, 30, 255) if mode == "RGBA" else 128).save(buf, format="PNG")
    return buf.getvalue()


def test_resizes_and_reencodes_as_jpeg():
    out = normalize_photo(_png((400, 200)), max_side=100, quality=80)
    img = Image.open(io.BytesIO(out))
    assert img.format == "JPEG"
    assert img.mode == "RGB"
    assert img.size == (100, 50)


def test_small_images_keep_their_size():
    img = Image.open(io.BytesIO(normalize_photo(_png((60, 40)), max_side=100)))
    assert img.size == (60, 40)


def test_rejects_non_images():
    with pytest.raises(ImageRejected):
        normalize_photo(b"definitely not an image")
