"""Qt presentation shells. All of them drive a shared ``GallerySession``."""

from .event_gallery import EventGallery
from .hero_slideshow import HeroSlideshow
from .indicators import SlideIndicators
from .inline_slider import InlineSlider
from .lightbox import LightboxDialog
from .pixmaps import PixmapCache
from .slide_view import SlideView
from .thumbnail_strip import ThumbnailStrip

__all__ = [
    "EventGallery",
    "HeroSlideshow",
    "InlineSlider",
    "LightboxDialog",
    "PixmapCache",
    "SlideIndicators",
    "SlideView",
    "ThumbnailStrip",
]
