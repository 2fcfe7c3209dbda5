"""Tests for the CLI entry points."""

from pathlib import Path

from click.testing import CliRunner

from metro_signs.cli import cli
from metro_signs.layout import compose_signs
from metro_signs.parser import parse_line_description

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
STATIONS_TXT = EXAMPLES_DIR / "stations.txt"

SMALL = "center:1+01,1+00\n1+01:<1,0\n1+00:0,>2\n"


def _write_assets(text, asset_dir):
    asset_dir.mkdir()
    for segment in parse_line_description(text):
        for sign in compose_signs(segment):
            for row in sign.grid:
                for token in row:
                    if token:
                        (asset_dir / f"{token}.png").write_bytes(b"\x89PNG")


def test_render_svg(tmp_path):
    src = tmp_path / "stations.txt"
    src.write_text(SMALL)
    assets = tmp_path / "images"
    _write_assets(SMALL, assets)
    out = tmp_path / "output"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(src), "--assets", str(assets), "-o", str(out), "--format", "svg",
    ])
    assert result.exit_code == 0, result.output
    assert "Generating line 1..." in result.output
    assert "Rendered 2 signs" in result.output
    assert sorted(p.name for p in out.iterdir()) == ["dh1+01+.svg", "sh1+00-#.svg"]


def test_render_assets_from_env(tmp_path):
    src = tmp_path / "stations.txt"
    src.write_text(SMALL)
    assets = tmp_path / "tiles"
    _write_assets(SMALL, assets)
    out = tmp_path / "signs"
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["render", str(src), "--format", "svg"],
        env={"METRO_SIGNS_ASSETS": str(assets), "METRO_SIGNS_OUTPUT": str(out)},
    )
    assert result.exit_code == 0, result.output
    assert (out / "dh1+01+.svg").exists()


def test_render_missing_assets_fails(tmp_path):
    src = tmp_path / "stations.txt"
    src.write_text(SMALL)
    assets = tmp_path / "images"
    assets.mkdir()
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(src), "--assets", str(assets), "-o", str(tmp_path / "out"),
        "--format", "svg",
    ])
    assert result.exit_code == 1
    assert "dh1+01+" in result.output
    assert "sh1+00-#" in result.output


def test_render_layout_error_skips_segment(tmp_path):
    src = tmp_path / "stations.txt"
    src.write_text("center:9+00\n9+01:<2\n9+00:0\n\n" + SMALL)
    assets = tmp_path / "images"
    _write_assets(SMALL, assets)
    out = tmp_path / "output"
    runner = CliRunner()
    result = runner.invoke(cli, [
        "render", str(src), "--assets", str(assets), "-o", str(out), "--format", "svg",
    ])
    assert result.exit_code == 1
    assert "Line 9: layout error" in result.output
    assert (out / "dh1+01+.svg").exists()


def test_validate_example():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(STATIONS_TXT)])
    assert result.exit_code == 0, result.output
    assert "Valid: 5 segments, 43 stations, 74 signs" in result.output


def test_validate_reports_layout_errors(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("center:A,C\nA:<1\nB:<1\nC:<1\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Validation errors:" in result.output
    assert "not adjacent" in result.output


def test_validate_warns_on_unknown_codes(tmp_path):
    src = tmp_path / "warn.txt"
    src.write_text("center:A,B\nA:<1\nB:<7\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(src)])
    assert result.exit_code == 0, result.output
    assert "unrecognized config code '<7'" in result.output


def test_validate_parse_error(tmp_path):
    bad = tmp_path / "bad.txt"
    bad.write_text("center:A\nA:<1,<1,<1\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(STATIONS_TXT)])
    assert result.exit_code == 0, result.output
    assert "Segments: 5" in result.output
    assert "Line 4: 4 stations, anchor 4+01, 4+00" in result.output
    assert "sh4+00+ (20x2)" in result.output
    assert "dh4+02-# (22x1)" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_render_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/stations.txt"])
    assert result.exit_code != 0
