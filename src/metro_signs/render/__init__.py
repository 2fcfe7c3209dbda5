"""Tile rendering."""

from metro_signs.render.compositor import (
    MissingAssetError,
    RenderReport,
    SignError,
    render_signs,
    render_tile_svg,
    write_sign,
)
from metro_signs.render.style import DEFAULT_STYLE, TileStyle

__all__ = [
    "DEFAULT_STYLE",
    "MissingAssetError",
    "RenderReport",
    "SignError",
    "TileStyle",
    "render_signs",
    "render_tile_svg",
    "write_sign",
]
