"""Centralized type definitions for PropGallery.

This module contains the TypedDict definitions for image data as it crosses
the boundary between the data-fetch layer and the gallery engine. All modules
should import these types from here rather than defining local aliases.

Data Flow Stages:
    Stage 1 (fetched rows / JSON manifest): list[RawImageData]
        [{"id": "a1", "base64Data": "...", "mimeType": "image/png", ...}, ...]

    Stage 2 (normalized once at ingestion): list[ImageRecord]
        See ``propgallery.core.images.ImageRecord``.

    Stage 3 (optional display projection): DisplayImage
        {"src": "data:image/png;base64,...", "alt": "...", ...}
"""

from __future__ import annotations

from typing import Literal, Union

from typing_extensions import TypedDict

# =============================================================================
# Raw Record Types (Stage 1 - as supplied by the caller)
# =============================================================================


class _RawImageDataRequired(TypedDict):
    """Required fields for a raw image row."""

    base64Data: str
    mimeType: str


class _RawImageDataOptional(TypedDict, total=False):
    """Optional fields for a raw image row.

    base64Data may already carry a full ``data:`` URI prefix; normalization
    handles both shapes.
    """

    id: Union[str, int]
    alt: str
    caption: str
    filename: str
    order: int
    isActive: bool


class RawImageData(_RawImageDataRequired, _RawImageDataOptional):
    """Image row as fetched from the listing database or a JSON manifest."""

    pass


# =============================================================================
# Display Types (Stage 3)
# =============================================================================


class DisplayImage(TypedDict):
    """Projection of a valid raw image for display.

    alt falls back alt -> caption -> filename -> "Image".
    filename falls back to ``image.<ext>`` derived from the MIME type.
    """

    src: str
    alt: str
    filename: str
    mimeType: str
    isValid: Literal[True]


# =============================================================================
# Type Aliases for Common Patterns
# =============================================================================

# Presentation shells selectable from config and the command line
PresentationName = Literal["inline", "hero", "lightbox", "grid"]

# Counter styles used by the shells ("3 / 8" inline, "3 of 8" in the lightbox)
CounterSeparator = Literal["/", "of"]
