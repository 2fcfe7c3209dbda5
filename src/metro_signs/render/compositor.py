"""Tile compositor: render sign grids using drawsvg.

Each non-empty token names an asset file (``<asset_dir>/<token>.png``) that
is embedded at ``(column * cell, row * cell)`` on a plain background. PNG
output rasterizes the SVG with cairosvg.
"""

from __future__ import annotations

__all__ = [
    "MissingAssetError",
    "RenderReport",
    "SignError",
    "render_signs",
    "render_tile_svg",
    "write_sign",
]

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import drawsvg as draw

from metro_signs.layout.composer import Sign
from metro_signs.render.constants import OUTPUT_FORMATS, PNG_SCALE
from metro_signs.render.style import DEFAULT_STYLE, TileStyle


class MissingAssetError(FileNotFoundError):
    """A tile token has no matching asset file."""


@dataclass
class SignError:
    """A sign that could not be rendered."""

    name: str
    message: str


@dataclass
class RenderReport:
    """Outcome of rendering a batch of signs."""

    written: list[Path] = field(default_factory=list)
    errors: list[SignError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def render_tile_svg(
    grid: Sequence[Sequence[str]],
    asset_dir: str | Path,
    style: TileStyle = DEFAULT_STYLE,
) -> str:
    """Compose a tile grid into an SVG string."""
    rows = len(grid)
    cols = max((len(row) for row in grid), default=0)
    if rows == 0 or cols == 0:
        raise ValueError("Cannot render an empty tile grid")

    cell = style.cell_size
    width = cols * cell
    height = rows * cell
    asset_dir = Path(asset_dir)

    d = draw.Drawing(width, height)
    d.append(draw.Rectangle(0, 0, width, height, fill=style.background_color))

    for r, row in enumerate(grid):
        for c, token in enumerate(row):
            if not token:
                continue
            path = asset_dir / f"{token}{style.asset_suffix}"
            if not path.is_file():
                raise MissingAssetError(f"No asset for tile '{token}': {path}")
            d.append(draw.Image(
                c * cell, r * cell, cell, cell,
                path=str(path), embed=True, mime_type=style.asset_mime_type,
            ))

    return d.as_svg()


def write_sign(
    sign: Sign,
    asset_dir: str | Path,
    output_dir: str | Path,
    style: TileStyle = DEFAULT_STYLE,
    fmt: str = "png",
) -> Path:
    """Render one sign and write it to ``<output_dir>/<sign.name>.<fmt>``."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format '{fmt}', expected one of {OUTPUT_FORMATS}")

    svg = render_tile_svg(sign.grid, asset_dir, style)
    out = Path(output_dir) / f"{sign.name}.{fmt}"

    if fmt == "svg":
        out.write_text(svg + "\n")
    else:
        import cairosvg

        cairosvg.svg2png(bytestring=svg.encode(), write_to=str(out), scale=PNG_SCALE)
    return out


def render_signs(
    signs: Iterable[Sign],
    asset_dir: str | Path,
    output_dir: str | Path,
    style: TileStyle = DEFAULT_STYLE,
    fmt: str = "png",
) -> RenderReport:
    """Render a batch of signs, recording failures per sign."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report = RenderReport()
    for sign in signs:
        try:
            report.written.append(write_sign(sign, asset_dir, output_dir, style, fmt))
        except Exception as e:
            report.errors.append(SignError(name=sign.name, message=str(e)))
    return report
