"""Row arrangement: place station tiles in a fixed-length row around the anchor.

The anchor (one station, or the boundary between two adjacent stations) is
kept at the middle of the row, so every sign of a segment lines its
stations up the same way.
"""

from __future__ import annotations

__all__ = [
    "AnchorNotFoundError",
    "AnchorShapeError",
    "LayoutError",
    "LengthError",
    "ParityError",
    "arrange_row",
    "find_anchor",
]

from collections.abc import Sequence

from metro_signs.layout.constants import TILE_PREFIX
from metro_signs.layout.status import resolve_status
from metro_signs.parser.model import Direction


class LayoutError(ValueError):
    """Base class for row arrangement failures."""


class AnchorShapeError(LayoutError):
    """Anchor does not have one or two stations."""


class ParityError(LayoutError):
    """Single-station anchor with an even row length."""


class LengthError(LayoutError):
    """Stations do not fit in the row."""


class AnchorNotFoundError(LayoutError):
    """Anchor is missing from the station list, or its pair is not adjacent."""


def find_anchor(stations: Sequence[str], anchor: Sequence[str]) -> int | None:
    """Return the index of the anchor's first station, or None.

    A two-station anchor only matches where both appear next to each other,
    in the same order.
    """
    width = len(anchor)
    for i in range(len(stations) - width + 1):
        if tuple(stations[i : i + width]) == tuple(anchor):
            return i
    return None


def arrange_row(
    stations: Sequence[str],
    anchor: Sequence[str],
    current: str,
    direction: Direction,
    length: int,
    blank: str,
) -> list[str]:
    """Lay out station tiles in a row of ``length`` cells.

    Each station becomes ``tc<station><marker>``; all other cells hold
    ``blank``. The anchor starts at ``length // 2`` (single station) or
    ``length // 2 - 1`` (pair).

    Raises a ``LayoutError`` subclass when the inputs cannot be laid out.
    """
    if len(anchor) not in (1, 2):
        raise AnchorShapeError(
            f"Anchor must have 1 or 2 stations, got {len(anchor)}: {list(anchor)}"
        )
    if len(anchor) == 1 and length % 2 == 0:
        raise ParityError(
            f"Row length must be odd for a single-station anchor, got {length}"
        )
    if len(stations) > length:
        raise LengthError(
            f"{len(stations)} stations do not fit in a row of {length} cells"
        )

    p = find_anchor(stations, anchor)
    if p is None:
        if len(anchor) == 1:
            raise AnchorNotFoundError(f"Anchor station '{anchor[0]}' is not on the line")
        raise AnchorNotFoundError(
            f"Anchor stations '{anchor[0]}', '{anchor[1]}' are not adjacent "
            f"in that order on the line"
        )

    target = length // 2 if len(anchor) == 1 else length // 2 - 1
    offset = target - p
    if offset < 0 or offset + len(stations) > length:
        raise LengthError(
            f"Stations overflow a row of {length} cells when centered on "
            f"{list(anchor)}"
        )

    row = [blank] * length
    markers = resolve_status(stations, current, direction)
    for i, (station, marker) in enumerate(zip(stations, markers)):
        row[offset + i] = f"{TILE_PREFIX}{station}{marker.value}"
    return row
