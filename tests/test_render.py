"""Tests for tile grid rendering."""

import xml.etree.ElementTree as ET

import pytest

from metro_signs.layout.composer import Sign
from metro_signs.parser.model import Pointing, Travel, Variant
from metro_signs.render import (
    MissingAssetError,
    TileStyle,
    render_signs,
    render_tile_svg,
    write_sign,
)

# Assets are embedded as raw bytes; SVG output never decodes them
PNG_BYTES = b"\x89PNG\r\n\x1a\nnot-really-an-image"


@pytest.fixture
def assets(tmp_path):
    asset_dir = tmp_path / "images"
    asset_dir.mkdir()
    for name in ("tc1", "tc1+01@#", "tczuo"):
        (asset_dir / f"{name}.png").write_bytes(PNG_BYTES)
    return asset_dir


def _images(svg):
    root = ET.fromstring(svg)
    return [el for el in root.iter() if el.tag.endswith("image")]


def _sign(name, grid):
    return Sign(
        name=name,
        station="1+01",
        travel=Travel.UP,
        pointing=Pointing.LEFT,
        variant=Variant.COMPACT,
        mirrored=False,
        grid=grid,
    )


def test_render_places_tiles_on_grid(assets):
    svg = render_tile_svg([["tczuo", "", "tc1"], ["", "tc1+01@#"]], assets)
    root = ET.fromstring(svg)
    assert root.get("width") == "384"
    assert root.get("height") == "256"
    positions = sorted((el.get("x"), el.get("y")) for el in _images(svg))
    assert positions == [("0", "0"), ("128", "128"), ("256", "0")]


def test_render_white_background(assets):
    svg = render_tile_svg([["tc1"]], assets)
    assert "#ffffff" in svg


def test_render_skips_blank_tokens(assets):
    svg = render_tile_svg([["", "", ""]], assets)
    assert _images(svg) == []


def test_render_custom_cell_size(assets):
    svg = render_tile_svg([["tc1", "tc1"]], assets, TileStyle(cell_size=16))
    root = ET.fromstring(svg)
    assert root.get("width") == "32"
    assert [el.get("x") for el in _images(svg)] == ["0", "16"]


def test_render_missing_asset(assets):
    with pytest.raises(MissingAssetError, match="tcnope"):
        render_tile_svg([["tc1", "tcnope"]], assets)


def test_missing_asset_is_file_not_found():
    assert issubclass(MissingAssetError, FileNotFoundError)


@pytest.mark.parametrize("grid", [[], [[]]])
def test_render_empty_grid(grid, assets):
    with pytest.raises(ValueError):
        render_tile_svg(grid, assets)


def test_write_sign_svg(assets, tmp_path):
    out = write_sign(_sign("dh1+01+", [["tc1"]]), assets, tmp_path, fmt="svg")
    assert out == tmp_path / "dh1+01+.svg"
    assert out.read_text().endswith("\n")


def test_write_sign_rejects_unknown_format(assets, tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        write_sign(_sign("x", [["tc1"]]), assets, tmp_path, fmt="gif")


def test_render_signs_continues_after_failure(assets, tmp_path):
    out_dir = tmp_path / "output"
    signs = [
        _sign("bad", [["tcmissing"]]),
        _sign("good", [["tc1", "tczuo"]]),
    ]
    report = render_signs(signs, assets, out_dir, fmt="svg")
    assert not report.ok
    assert [e.name for e in report.errors] == ["bad"]
    assert "tcmissing" in report.errors[0].message
    assert report.written == [out_dir / "good.svg"]
    assert (out_dir / "good.svg").exists()
    assert not (out_dir / "bad.svg").exists()
