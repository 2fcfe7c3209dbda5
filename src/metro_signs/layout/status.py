"""Per-station progress markers relative to a current station.

Each station gets a marker depending on whether it is the origin, the
terminus, or an interior stop for the given direction, and on whether it
is the current station:

=========  ==================  ===============  ==================  ===============
Role       descending current  descending       ascending current   ascending
=========  ==================  ===============  ==================  ===============
Origin     ``@``               ``=``            ``@#``              ``#=``
Terminus   ``@=``              ``""``           ``@#=``             ``#``
Interior   ``@``               ahead/traversed  ``@=``              ahead/traversed
=========  ==================  ===============  ==================  ===============

An interior station ahead of the current one (lower index when descending,
higher when ascending) is ``""``; otherwise it is ``=``.
"""

from __future__ import annotations

__all__ = ["StatusMarker", "resolve_status"]

from collections.abc import Sequence
from enum import Enum

from metro_signs.parser.model import Direction


class StatusMarker(Enum):
    """Suffix appended to a station tile name."""

    AHEAD = ""
    TRAVERSED = "="
    TERMINUS = "#"
    CURRENT = "@"
    CURRENT_TRAVERSED = "@="
    CURRENT_ORIGIN = "@#"
    CURRENT_TERMINUS = "@#="
    ORIGIN = "#="

    @property
    def is_current(self) -> bool:
        return self.value.startswith("@")


_ORIGIN = {
    (Direction.DESCENDING, True): StatusMarker.CURRENT,
    (Direction.DESCENDING, False): StatusMarker.TRAVERSED,
    (Direction.ASCENDING, True): StatusMarker.CURRENT_ORIGIN,
    (Direction.ASCENDING, False): StatusMarker.ORIGIN,
}

_TERMINUS = {
    (Direction.DESCENDING, True): StatusMarker.CURRENT_TRAVERSED,
    (Direction.DESCENDING, False): StatusMarker.AHEAD,
    (Direction.ASCENDING, True): StatusMarker.CURRENT_TERMINUS,
    (Direction.ASCENDING, False): StatusMarker.TERMINUS,
}


def resolve_status(
    stations: Sequence[str],
    current: str,
    direction: Direction,
) -> list[StatusMarker]:
    """Return one marker per station.

    If ``current`` is not in ``stations`` no station is treated as current.
    """
    try:
        current_index = list(stations).index(current)
    except ValueError:
        current_index = -1

    ascending = direction is Direction.ASCENDING
    last = len(stations) - 1
    origin_index = 0 if ascending else last
    terminus_index = last if ascending else 0

    markers: list[StatusMarker] = []
    for i in range(len(stations)):
        is_current = i == current_index
        if i == origin_index:
            markers.append(_ORIGIN[(direction, is_current)])
        elif i == terminus_index:
            markers.append(_TERMINUS[(direction, is_current)])
        elif is_current:
            markers.append(
                StatusMarker.CURRENT_TRAVERSED if ascending else StatusMarker.CURRENT
            )
        elif (i < current_index and not ascending) or (i > current_index and ascending):
            markers.append(StatusMarker.AHEAD)
        else:
            markers.append(StatusMarker.TRAVERSED)
    return markers
