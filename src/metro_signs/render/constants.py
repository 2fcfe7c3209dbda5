"""Render constants used across render modules.

Style-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CELL_SIZE: int = 128
"""Side length of one square tile, in pixels."""

BACKGROUND_COLOR: str = "#ffffff"
"""Canvas fill behind the tiles."""

# ---------------------------------------------------------------------------
# Assets and output
# ---------------------------------------------------------------------------
ASSET_SUFFIX: str = ".png"
"""File extension of tile assets."""

ASSET_MIME_TYPE: str = "image/png"
"""MIME type used when embedding assets (tile names may contain ``#``)."""

OUTPUT_FORMATS: tuple[str, ...] = ("png", "svg")
"""Supported sign output formats."""

PNG_SCALE: float = 1.0
"""Scale passed to cairosvg when rasterizing a sign."""
