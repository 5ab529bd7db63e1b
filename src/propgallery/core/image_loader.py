"""Load gallery images from a folder or a JSON manifest of listing rows."""

import fnmatch
import hashlib
import json
import os
from pathlib import Path
from typing import cast

from ..type_defs import RawImageData
from ..utils.logging_config import log_function, logger
from .images import EncodedPayload, ImageRecord, normalize_image_record, row_order, sniff_mime_type

IMAGE_EXTENSIONS = [".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tiff"]

EXTENSION_MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".tiff": "image/tiff",
}


def _parse_exclude_patterns(exclude_patterns: str) -> list[str]:
    if not exclude_patterns:
        return []
    raw_patterns = [p.strip() for p in exclude_patterns.replace(';', ',').split(',')]
    return [p.lower() for p in raw_patterns if p]


@log_function
def scan_image_files(root_dir: str, exclude_patterns: str = "") -> list[str]:
    """List image files directly inside ``root_dir``, sorted by name.

    Skips dot files, macOS resource forks (``._*``) and names matching any of
    the comma/semicolon separated, case-insensitive ``exclude_patterns``.
    """
    if not os.path.isdir(root_dir):
        logger.error(f"Image directory does not exist: {root_dir}")
        return []

    patterns = _parse_exclude_patterns(exclude_patterns)
    if patterns:
        logger.info(f"Applying exclude patterns: {patterns}")

    images: list[str] = []
    for name in sorted(os.listdir(root_dir)):
        if name.startswith("."):
            continue
        if any(fnmatch.fnmatch(name.lower(), pattern) for pattern in patterns):
            logger.debug(f"Excluding {name}")
            continue
        path = os.path.join(root_dir, name)
        if os.path.isfile(path) and os.path.splitext(name)[1].lower() in IMAGE_EXTENSIONS:
            images.append(path)

    logger.info(f"Found {len(images)} images in {root_dir}")
    return images


@log_function
def load_directory(root_dir: str, exclude_patterns: str = "") -> list[ImageRecord]:
    """Read every image in a folder into memory as gallery records."""
    records: list[ImageRecord] = []
    for image_path in scan_image_files(root_dir, exclude_patterns):
        try:
            with open(image_path, "rb") as f:
                data = f.read()
        except OSError as e:
            logger.error(f"Could not read {image_path}: {e}")
            continue

        extension = os.path.splitext(image_path)[1].lower()
        mime_type = sniff_mime_type(data) or EXTENSION_MIME_TYPES.get(extension, "image/jpeg")
        path_hash = hashlib.md5(image_path.encode()).hexdigest()[:8]
        stem = Path(image_path).stem

        records.append(ImageRecord(
            id=path_hash,
            payload=EncodedPayload(data, mime_type),
            alt_text=None,
            caption=stem.replace("_", " ").replace("-", " "),
            order=len(records),
            filename=os.path.basename(image_path),
        ))

    return records


@log_function
def load_manifest(manifest_path: str) -> list[ImageRecord]:
    """Load a JSON array of raw image rows.

    Inactive rows are dropped and the rest are stably ordered by ``order``;
    a missing or non-integer ``order`` counts as the row's position. The
    gallery itself trusts this order and never re-sorts.

    Raises:
        ValueError: if the file is not a JSON array of objects
    """
    try:
        with open(manifest_path, encoding="utf-8") as f:
            data: object = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON manifest {manifest_path}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"Manifest {manifest_path} must be a JSON array of image objects")

    rows = cast(list[RawImageData], data)
    active = [row for row in rows if row.get("isActive", True)]
    indexed = sorted(enumerate(active), key=lambda pair: row_order(pair[1], pair[0]))

    records = [normalize_image_record(row, position) for position, row in indexed]
    skipped = len(rows) - len(active)
    if skipped:
        logger.info(f"Skipped {skipped} inactive image(s) from manifest")
    logger.info(f"Loaded {len(records)} image(s) from manifest {manifest_path}")
    return records


@log_function
def load_images(path: str, exclude_patterns: str = "") -> list[ImageRecord]:
    """Dispatch to the folder or manifest loader based on ``path``."""
    if os.path.isdir(path):
        return load_directory(path, exclude_patterns)
    if os.path.isfile(path) and path.lower().endswith(".json"):
        return load_manifest(path)
    raise ValueError(f"Expected an image folder or a .json manifest, got: {path}")
