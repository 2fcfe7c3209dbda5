"""Layout constants used across layout modules.

Row lengths and tile naming conventions for generated signs. The composer
reads the row lengths through ``SignPolicy`` so they can be overridden.
"""

# ---------------------------------------------------------------------------
# Row lengths
# ---------------------------------------------------------------------------
DETAILED_ROW_LENGTH: int = 20
"""Cells in both rows of a detailed (two-row) sign."""

COMPACT_ROW_LENGTH: int = 15
"""Cells in the progress row of a compact sign without a boundary cap."""

COMPACT_CAPPED_ROW_LENGTH: int = 14
"""Progress row length when the boundary cap tile is added."""

COMPACT_CAP_MAX_STATIONS: int = 14
"""Segments with at most this many stations get the boundary cap tile."""

HEADER_PADDING: int = 6
"""Empty cells on each side of a detailed sign's header row."""

# ---------------------------------------------------------------------------
# Tile naming
# ---------------------------------------------------------------------------
TILE_PREFIX: str = "tc"
"""Prefix shared by every tile asset name."""

TILE_ARROW_LEFT: str = "tczuo"
TILE_ARROW_RIGHT: str = "tcyou"
TILE_DEPARTING: str = "tckaiwang"
"""First half of the "departing toward" pair."""

TILE_BOARD_PREFIX: str = "tckw"
"""Departure-board tile, followed by line id and travel sense."""

TILE_TERMINAL: str = "tczhongdianzhan"
"""Shown instead of the departure pair at a line extremity."""

TILE_DIVIDER: str = "tcfenge"
TILE_NAME_PREFIX: str = "tczm"
"""Station-name tile, followed by the station id."""

CAP_LEFT_SUFFIX: str = "zuo"
CAP_RIGHT_SUFFIX: str = "you"
"""Boundary cap tiles are ``tc<line>zuo`` / ``tc<line>you``."""

RIGHT_FACING_SUFFIX: str = "#"
"""Appended to the output name of right-facing signs."""
