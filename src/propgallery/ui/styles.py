"""Design tokens and stylesheets shared by the gallery shells."""

# ----------------------------- Design Tokens -----------------------------

SPACING_XS = 2
SPACING_SM = 4
SPACING_MD = 8
SPACING_LG = 12
SPACING_XL = 16

COLOR_PRIMARY = "#1976D2"           # Current thumbnail ring / active dot
COLOR_SURFACE = "#FFFFFF"
COLOR_MUTED = "#ECEFF1"             # Empty-state background
COLOR_BORDER = "#E0E0E0"
COLOR_TEXT_PRIMARY = "#37474F"
COLOR_TEXT_SECONDARY = "#78909C"

COLOR_OVERLAY = "rgba(0, 0, 0, 0.6)"   # Counter and caption pills
COLOR_LIGHTBOX_BG = "#0D0D0D"
COLOR_LIGHTBOX_TEXT = "#FFFFFF"
COLOR_LIGHTBOX_HOVER = "rgba(255, 255, 255, 0.2)"

COLOR_DOT = "rgba(255, 255, 255, 0.5)"
COLOR_DOT_ACTIVE = "#FFFFFF"

SLIDE_MIN_HEIGHT = 450
THUMBNAIL_SCROLL_MS = 250

# ----------------------------- Stylesheets -----------------------------

SLIDER_STYLE = f"""
    #slideImage {{
        background-color: {COLOR_MUTED};
        border-radius: 12px;
    }}

    #slideCounter, #slideCaption {{
        background-color: {COLOR_OVERLAY};
        color: {COLOR_LIGHTBOX_TEXT};
        border-radius: 10px;
        padding: {SPACING_XS}px {SPACING_MD}px;
        font-size: 12px;
    }}

    #emptyState {{
        color: {COLOR_TEXT_SECONDARY};
        font-size: 14px;
    }}

    #navButton {{
        background-color: rgba(255, 255, 255, 0.8);
        border: none;
        border-radius: 16px;
        min-width: 32px;
        min-height: 32px;
        font-size: 16px;
    }}

    #navButton:hover {{
        background-color: rgba(255, 255, 255, 0.95);
    }}

    #thumbnailButton {{
        border: 2px solid {COLOR_BORDER};
        border-radius: 8px;
        padding: 0px;
    }}

    #thumbnailButton:checked {{
        border: 2px solid {COLOR_PRIMARY};
    }}

    #indicatorDot {{
        background-color: {COLOR_DOT};
        border: none;
        border-radius: 6px;
        min-width: 12px;
        max-width: 12px;
        min-height: 12px;
        max-height: 12px;
    }}

    #indicatorDot:checked {{
        background-color: {COLOR_DOT_ACTIVE};
    }}
"""

LIGHTBOX_STYLE = SLIDER_STYLE + f"""
    QDialog {{
        background-color: {COLOR_LIGHTBOX_BG};
    }}

    #lightboxButton {{
        background-color: transparent;
        color: {COLOR_LIGHTBOX_TEXT};
        border: none;
        border-radius: 18px;
        min-width: 36px;
        min-height: 36px;
        font-size: 18px;
    }}

    #lightboxButton:hover {{
        background-color: {COLOR_LIGHTBOX_HOVER};
    }}

    #lightboxCounter {{
        color: {COLOR_LIGHTBOX_TEXT};
        font-size: 13px;
    }}

    #slideImage {{
        background-color: transparent;
    }}
"""

GRID_STYLE = SLIDER_STYLE + f"""
    #galleryTitle {{
        color: {COLOR_TEXT_PRIMARY};
        font-size: 24px;
        font-weight: bold;
    }}

    #gallerySubtitle {{
        color: {COLOR_TEXT_SECONDARY};
        font-size: 13px;
    }}

    #startSlideshowButton {{
        background-color: {COLOR_PRIMARY};
        color: {COLOR_SURFACE};
        border: none;
        border-radius: 16px;
        padding: {SPACING_MD}px {SPACING_XL}px;
        font-size: 14px;
        font-weight: bold;
    }}

    #gridTile {{
        border: none;
        border-radius: 16px;
        padding: 0px;
    }}
"""
