"""PropGallery - slideshow and lightbox galleries for property listings."""

__version__ = "1.0.0"
