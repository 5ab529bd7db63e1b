"""Image records - validated once at ingestion, rendered without prefix sniffing."""

import base64
import binascii
import io
from dataclasses import dataclass, field
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError

from ..type_defs import DisplayImage, RawImageData
from ..utils.logging_config import log_function, logger

VALID_MIME_TYPES = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/svg+xml",
)

MIME_TO_EXTENSION = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}

PLACEHOLDER_COLOR = (224, 224, 224)
PLACEHOLDER_ACCENT = (189, 189, 189)

# ----------------------------- Payload Variants -----------------------------


@dataclass(frozen=True)
class ReadyPayload:
    """A URI that can be displayed as-is (file path, file:// or http(s) URL)."""
    uri: str

    def to_uri(self) -> str:
        return self.uri


@dataclass(frozen=True)
class EncodedPayload:
    """Decoded image bytes together with their MIME type."""
    data: bytes
    mime_type: str

    def to_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


ImagePayload = Union[ReadyPayload, EncodedPayload]


@dataclass(frozen=True)
class ImageRecord:
    """One gallery image. A ``None`` payload marks a malformed record."""
    id: str
    payload: Optional[ImagePayload]
    alt_text: Optional[str] = None
    caption: Optional[str] = None
    order: int = 0
    filename: Optional[str] = None
    display_uri: Optional[str] = field(init=False, default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        uri = self.payload.to_uri() if self.payload is not None else None
        object.__setattr__(self, "display_uri", uri)

    @property
    def is_valid(self) -> bool:
        return self.payload is not None

    @property
    def mime_type(self) -> Optional[str]:
        if isinstance(self.payload, EncodedPayload):
            return self.payload.mime_type
        return None


# ----------------------------- Raw Data Helpers -----------------------------


def create_image_src(base64_data: Optional[str], mime_type: Optional[str]) -> Optional[str]:
    """Build a data URI from base64 data, passing complete data URIs through."""
    if not base64_data or not mime_type:
        return None
    if base64_data.startswith("data:"):
        return base64_data
    return f"data:{mime_type};base64,{base64_data}"


def is_valid_image_data(base64_data: Optional[str], mime_type: Optional[str]) -> bool:
    if not base64_data or not mime_type:
        return False
    return mime_type.lower() in VALID_MIME_TYPES


def get_file_extension_from_mime_type(mime_type: Optional[str]) -> str:
    if not mime_type:
        return "jpg"
    return MIME_TO_EXTENSION.get(mime_type.lower(), "jpg")


def process_image_for_display(raw: Optional[RawImageData]) -> Optional[DisplayImage]:
    """Project a raw row for display, or None when its data is unusable."""
    if not raw:
        return None

    base64_data = raw.get("base64Data")
    mime_type = raw.get("mimeType")
    src = create_image_src(base64_data, mime_type)
    if src is None or not is_valid_image_data(base64_data, mime_type):
        return None

    filename = raw.get("filename")
    return {
        "src": src,
        "alt": raw.get("alt") or raw.get("caption") or filename or "Image",
        "filename": filename or f"image.{get_file_extension_from_mime_type(mime_type)}",
        "mimeType": mime_type,
        "isValid": True,
    }


def alt_text_for(record: ImageRecord, index: int, prefix: str = "Image") -> str:
    """Alt text with the gallery's fallback chain: alt, caption, then a numbered label."""
    return record.alt_text or record.caption or f"{prefix} {index + 1}"


def _parse_data_uri(uri: str) -> Optional[EncodedPayload]:
    header, sep, body = uri.partition(",")
    if not sep or not header.endswith(";base64"):
        return None
    mime_type = header[len("data:"):-len(";base64")].lower()
    if mime_type not in VALID_MIME_TYPES:
        return None
    try:
        return EncodedPayload(base64.b64decode(body, validate=True), mime_type)
    except (binascii.Error, ValueError):
        return None


def _normalize_payload(base64_data: Optional[str], mime_type: Optional[str]) -> Optional[ImagePayload]:
    if not base64_data:
        return None

    if base64_data.startswith("data:"):
        return _parse_data_uri(base64_data)

    if "://" in base64_data:
        return ReadyPayload(base64_data)

    if mime_type is None or not is_valid_image_data(base64_data, mime_type):
        return None
    try:
        return EncodedPayload(base64.b64decode(base64_data, validate=True), mime_type.lower())
    except (binascii.Error, ValueError):
        return None


def row_order(raw: RawImageData, position: int) -> int:
    """The row's integer ``order``, or ``position`` when it is missing or not an int."""
    order = raw.get("order")
    if isinstance(order, int) and not isinstance(order, bool):
        return order
    if order is not None:
        logger.warning(f"Ignoring non-integer order {order!r}; using position {position}")
    return position


def normalize_image_record(raw: RawImageData, position: int) -> ImageRecord:
    """Convert a raw row into an ``ImageRecord``.

    Malformed payloads never raise: the record is kept with ``payload=None`` so
    the presentation layer can substitute a placeholder for that one slide.
    """
    raw_id = raw.get("id")
    record_id = str(raw_id) if raw_id is not None and raw_id != "" else str(position)

    payload = _normalize_payload(raw.get("base64Data"), raw.get("mimeType"))
    if payload is None:
        logger.warning(f"Malformed image record {record_id}: missing or undecodable payload")

    return ImageRecord(
        id=record_id,
        payload=payload,
        alt_text=raw.get("alt") or None,
        caption=raw.get("caption") or None,
        order=row_order(raw, position),
        filename=raw.get("filename") or None,
    )


@log_function
def normalize_image_records(raws: list[RawImageData]) -> list[ImageRecord]:
    return [normalize_image_record(raw, position) for position, raw in enumerate(raws)]


# ----------------------------- Pillow Helpers -----------------------------


def sniff_mime_type(data: bytes) -> Optional[str]:
    """Detect an image's MIME type from its bytes."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            image_format = image.format
    except (UnidentifiedImageError, OSError):
        return None
    if image_format is None:
        return None
    return Image.MIME.get(image_format.upper())


def record_bytes(record: ImageRecord) -> Optional[bytes]:
    """Raw bytes for a record that carries them, reading local file URIs."""
    payload = record.payload
    if isinstance(payload, EncodedPayload):
        return payload.data
    if isinstance(payload, ReadyPayload):
        uri = payload.uri
        path = uri[len("file://"):] if uri.startswith("file://") else None
        if path is None:
            return None
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.warning(f"Could not read image {path}: {e}")
            return None
    return None


def _flatten_to_rgb(image: Image.Image) -> Image.Image:
    if image.mode in ("RGBA", "LA", "P"):
        if image.mode == "P":
            image = image.convert("RGBA")
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[-1] if image.mode in ("RGBA", "LA") else None)
        return background
    if image.mode != "RGB":
        return image.convert("RGB")
    return image


def make_thumbnail_png(record: ImageRecord, size: int) -> Optional[bytes]:
    """Square-bounded PNG thumbnail of a record, or None if it cannot be decoded."""
    data = record_bytes(record)
    if data is None:
        return None
    try:
        with Image.open(io.BytesIO(data)) as image:
            thumb = _flatten_to_rgb(image)
            thumb = thumb.copy()
            thumb.thumbnail((size, size), Image.Resampling.LANCZOS)
            out = io.BytesIO()
            thumb.save(out, "PNG")
            return out.getvalue()
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.warning(f"Could not build thumbnail for image {record.id}: {e}")
        return None


def placeholder_png(width: int, height: int) -> bytes:
    """Neutral placeholder shown in place of a missing or broken image."""
    image = Image.new("RGB", (max(width, 1), max(height, 1)), PLACEHOLDER_COLOR)
    inset_w = max(width // 4, 1)
    inset_h = max(height // 4, 1)
    frame = Image.new("RGB", (inset_w * 2, inset_h * 2), PLACEHOLDER_ACCENT)
    image.paste(frame, (inset_w, inset_h))
    out = io.BytesIO()
    image.save(out, "PNG")
    return out.getvalue()
