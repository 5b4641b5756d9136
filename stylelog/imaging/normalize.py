import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from stylelog.core.config import settings

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/webp"}


class ImageRejected(ValueError):
    """Upload is not an image Pillow can decode."""


def normalize_photo(raw: bytes, max_side: int | None = None, quality: int | None = None) -> bytes:
    """Orient, flatten to RGB, bound the longest side and re-encode as JPEG."""
    max_side = max_side or settings.IMAGE_MAX_SIDE
    quality = quality or settings.IMAGE_JPEG_QUALITY
    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageRejected("invalid_image") from exc

    img = ImageOps.exif_transpose(img)
    if img.mode != "RGB":
        img = img.convert("RGB")
    src = img.size
    img.thumbnail((max_side, max_side), Image.Resampling.LANCZOS)

    out = io.BytesIO()
    img.save(out, format="JPEG", quality=quality, optimize=True)
    logger.debug("image:normalized src=%sx%s out=%sx%s bytes=%d", src[0], src[1], img.size[0], img.size[1], out.tell())
    return out.getvalue()
