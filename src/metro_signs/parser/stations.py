"""Parser for plain-text line descriptions.

Uses a simple line-by-line approach. A file holds one or more segments
separated by blank lines::

    center:1+01,1+00
    1+02:<1
    1+01:<2,>1
    1+00:<1

The first line of a segment names the anchor (one or two stations, the part
before the separator is ignored). Each following line is a station with one
config code shared by both rows, or two codes (``+`` row, ``-`` row).
"""

from __future__ import annotations

from pathlib import Path

from metro_signs.parser.model import ConfigCode, Segment

_NO_SIGN = "0"


def load_line_description(path: str | Path) -> list[Segment]:
    """Read and parse a line description file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_line_description(text)


def parse_line_description(text: str) -> list[Segment]:
    """Parse a line description into segments."""
    segments: list[Segment] = []
    block: list[tuple[int, str]] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped:
            if block:
                segment = _parse_segment(block)
                if segment is not None:
                    segments.append(segment)
                block = []
            continue
        block.append((lineno, stripped.replace(" ", "")))

    if block:
        segment = _parse_segment(block)
        if segment is not None:
            segments.append(segment)

    return segments


def _split_entry(line: str) -> tuple[str, list[str]] | None:
    """Split ``station:values`` into its parts.

    The separator is the last ``:``, falling back to the first ``,``.
    """
    sep = line.rfind(":")
    if sep == -1:
        sep = line.find(",")
    if sep == -1:
        return None
    return line[:sep], line[sep + 1 :].split(",")


def _parse_segment(block: list[tuple[int, str]]) -> Segment | None:
    anchor: tuple[str, ...] = ()
    stations: list[str] = []
    up_raw: list[str] = []
    down_raw: list[str] = []
    first = True

    for lineno, line in block:
        entry = _split_entry(line)
        if entry is None:
            continue
        station, values = entry

        if first:
            first = False
            anchor = tuple(values[:2])
            continue

        if len(values) == 1:
            up, down = values[0], values[0]
        elif len(values) == 2:
            up, down = values
        else:
            raise ValueError(
                f"Line {lineno}: station '{station}' has {len(values)} config "
                f"codes, expected 1 or 2"
            )
        stations.append(station)
        up_raw.append(up)
        down_raw.append(down)

    if not stations:
        return None

    unrecognized = [
        (station, raw)
        for station, raw in zip(stations + stations, up_raw + down_raw)
        if raw != _NO_SIGN and ConfigCode.parse(raw) is None
    ]

    return Segment(
        stations=tuple(stations),
        anchor=anchor,
        up_codes=tuple(ConfigCode.parse(raw) for raw in up_raw),
        down_codes=tuple(ConfigCode.parse(raw) for raw in down_raw),
        unrecognized=tuple(unrecognized),
    )
