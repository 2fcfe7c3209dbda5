"""Sign composer: enumerate every sign of a segment and build its tile grid.

Two passes are made over the stations. The first walks them as given and
builds left-facing signs from the ``+`` row and right-facing signs from the
``-`` row. The second walks a reversed copy of the segment and builds the
remaining combinations (left-facing from ``-``, right-facing from ``+``).
"""

from __future__ import annotations

__all__ = ["DEFAULT_POLICY", "Sign", "SignPolicy", "compose_signs"]

from dataclasses import dataclass

from metro_signs.layout.arrange import arrange_row
from metro_signs.layout.constants import (
    CAP_LEFT_SUFFIX,
    CAP_RIGHT_SUFFIX,
    COMPACT_CAP_MAX_STATIONS,
    COMPACT_CAPPED_ROW_LENGTH,
    COMPACT_ROW_LENGTH,
    DETAILED_ROW_LENGTH,
    HEADER_PADDING,
    RIGHT_FACING_SUFFIX,
    TILE_ARROW_LEFT,
    TILE_ARROW_RIGHT,
    TILE_BOARD_PREFIX,
    TILE_DEPARTING,
    TILE_DIVIDER,
    TILE_NAME_PREFIX,
    TILE_PREFIX,
    TILE_TERMINAL,
)
from metro_signs.parser.model import (
    ConfigCode,
    Direction,
    Pointing,
    Segment,
    Travel,
    Variant,
)


@dataclass(frozen=True)
class SignPolicy:
    """Row lengths used when building signs."""

    detailed_length: int = DETAILED_ROW_LENGTH
    compact_length: int = COMPACT_ROW_LENGTH
    compact_capped_length: int = COMPACT_CAPPED_ROW_LENGTH
    cap_max_stations: int = COMPACT_CAP_MAX_STATIONS
    header_padding: int = HEADER_PADDING


DEFAULT_POLICY = SignPolicy()


@dataclass
class Sign:
    """A tile grid ready for the compositor, with its output name."""

    name: str
    station: str
    travel: Travel
    pointing: Pointing
    variant: Variant
    mirrored: bool
    grid: list[list[str]]

    @property
    def columns(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    @property
    def rows(self) -> int:
        return len(self.grid)


# (mirrored, travel of left-facing signs, travel of right-facing signs)
_PASSES = (
    (False, Travel.UP, Travel.DOWN),
    (True, Travel.DOWN, Travel.UP),
)


def compose_signs(segment: Segment, policy: SignPolicy = DEFAULT_POLICY) -> list[Sign]:
    """Build every sign requested by a segment's config rows.

    Layout errors propagate; no signs are returned for a segment that
    cannot be laid out.
    """
    line = segment.line_id
    signs: list[Sign] = []

    for mirrored, left_travel, right_travel in _PASSES:
        view = segment.reversed() if mirrored else segment
        for num in range(len(view.stations)):
            for pointing, travel in (
                (Pointing.LEFT, left_travel),
                (Pointing.RIGHT, right_travel),
            ):
                code = view.codes(travel)[num]
                if code is None or code.pointing is not pointing:
                    continue
                signs.append(_build_sign(view, num, line, code, travel, mirrored, policy))

    return signs


def _build_sign(
    view: Segment,
    num: int,
    line: str,
    code: ConfigCode,
    travel: Travel,
    mirrored: bool,
    policy: SignPolicy,
) -> Sign:
    station = view.stations[num]
    left = code.pointing is Pointing.LEFT
    extremity = num == 0 if left else num == len(view.stations) - 1

    if extremity:
        arrow = ""
        towards = [TILE_TERMINAL, ""] if left else ["", TILE_TERMINAL, ""]
    else:
        arrow = TILE_ARROW_LEFT if left else TILE_ARROW_RIGHT
        towards = [TILE_DEPARTING, f"{TILE_BOARD_PREFIX}{line}{travel.value}"]
        if not left:
            towards.append("")

    sense = f"{TILE_PREFIX}{line}{travel.value}"
    name_tile = f"{TILE_NAME_PREFIX}{station}"
    direction = Direction.DESCENDING if left else Direction.ASCENDING
    blank = f"{TILE_PREFIX}{line}"

    if code.variant is Variant.DETAILED:
        if left:
            header = [arrow, sense, TILE_DIVIDER, name_tile, "", *towards, ""]
        else:
            header = [*towards, name_tile, "", TILE_DIVIDER, sense, arrow]
        pad = [""] * policy.header_padding
        progress = arrange_row(
            view.stations, view.anchor, station, direction,
            policy.detailed_length, blank,
        )
        grid = [pad + header + pad, progress]
    else:
        if left:
            header = [arrow, sense, *towards, "", name_tile, ""]
        else:
            header = [name_tile, "", *towards, sense, arrow]
        length = policy.compact_length
        if len(view.stations) <= policy.cap_max_stations:
            length = policy.compact_capped_length
            if left:
                header.append(f"{TILE_PREFIX}{line}{CAP_LEFT_SUFFIX}")
            else:
                header.insert(0, f"{TILE_PREFIX}{line}{CAP_RIGHT_SUFFIX}")
        progress = arrange_row(
            view.stations, view.anchor, station, direction, length, blank,
        )
        grid = [header + progress if left else progress + header]

    name = f"{code.variant.prefix}{station}{travel.value}"
    if not left:
        name += RIGHT_FACING_SUFFIX

    return Sign(
        name=name,
        station=station,
        travel=travel,
        pointing=code.pointing,
        variant=code.variant,
        mirrored=mirrored,
        grid=grid,
    )
