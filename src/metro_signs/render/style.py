"""Style settings for tile rendering."""

from __future__ import annotations

from dataclasses import dataclass

from metro_signs.render.constants import (
    ASSET_MIME_TYPE,
    ASSET_SUFFIX,
    BACKGROUND_COLOR,
    CELL_SIZE,
)


@dataclass
class TileStyle:
    """Canvas and asset settings for composing tile grids."""

    cell_size: int = CELL_SIZE
    background_color: str = BACKGROUND_COLOR
    asset_suffix: str = ASSET_SUFFIX
    asset_mime_type: str = ASSET_MIME_TYPE


DEFAULT_STYLE = TileStyle()
