"""Data model for line descriptions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum

LINE_SUFFIX_LENGTH = 3
"""Trailing characters of a station id that follow the line number."""


class Direction(Enum):
    """Traversal sense of a station list (by index order)."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class Travel(Enum):
    """Travel sense a config row belongs to (row 0 is ``+``, row 1 is ``-``)."""

    UP = "+"
    DOWN = "-"


class Pointing(Enum):
    """Which way a sign faces, from the leading character of a config code."""

    LEFT = "<"
    RIGHT = ">"


class Variant(Enum):
    """Sign layout variant selected by the trailing digit of a config code."""

    COMPACT = 1
    DETAILED = 2

    @property
    def prefix(self) -> str:
        return "sh" if self is Variant.DETAILED else "dh"


_CODE_PATTERN = re.compile(r"^([<>])([12])$")


@dataclass(frozen=True)
class ConfigCode:
    """A decoded per-station, per-row sign request."""

    pointing: Pointing
    variant: Variant

    @classmethod
    def parse(cls, raw: str) -> ConfigCode | None:
        """Decode a raw code such as ``<2``.

        Returns None for ``0`` and for anything that is not a recognized code;
        both mean "no sign".
        """
        m = _CODE_PATTERN.match(raw.strip())
        if not m:
            return None
        return cls(pointing=Pointing(m.group(1)), variant=Variant(int(m.group(2))))

    def __str__(self) -> str:
        return f"{self.pointing.value}{self.variant.value}"


@dataclass(frozen=True)
class Segment:
    """One line segment: ordered stations, an anchor, and two config rows.

    Segments are immutable; the mirrored pass works on ``reversed()``.
    """

    stations: tuple[str, ...]
    anchor: tuple[str, ...]
    up_codes: tuple[ConfigCode | None, ...]
    down_codes: tuple[ConfigCode | None, ...]
    # (station, raw code) pairs that did not decode to a known code
    unrecognized: tuple[tuple[str, str], ...] = field(default=())

    def __post_init__(self) -> None:
        if len(self.up_codes) != len(self.stations) or len(self.down_codes) != len(
            self.stations
        ):
            raise ValueError(
                f"Config rows must have one entry per station "
                f"({len(self.stations)} stations, {len(self.up_codes)} and "
                f"{len(self.down_codes)} codes)"
            )

    @property
    def line_id(self) -> str:
        """Line number encoded in the first station id (``"1+06"`` -> ``"1"``)."""
        if not self.stations:
            return ""
        return self.stations[0][:-LINE_SUFFIX_LENGTH]

    def codes(self, travel: Travel) -> tuple[ConfigCode | None, ...]:
        return self.up_codes if travel is Travel.UP else self.down_codes

    def reversed(self) -> Segment:
        """Return a mirrored copy; a two-station anchor swaps its members."""
        return replace(
            self,
            stations=self.stations[::-1],
            anchor=self.anchor[::-1],
            up_codes=self.up_codes[::-1],
            down_codes=self.down_codes[::-1],
        )
