from __future__ import annotations

import shutil
from pathlib import Path

from typer.testing import CliRunner

from datesheet.main import app
from datesheet.pipeline.fonts import BUNDLED_FONT_PATH


runner = CliRunner()


def test_render_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    font_dir = tmp_path / "fonts"
    font_dir.mkdir()
    shutil.copy(BUNDLED_FONT_PATH, font_dir / "LiberationSans-Regular.ttf")

    result = runner.invoke(app, ["render"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "output.pdf").read_bytes().startswith(b"%PDF")


def test_bare_invocation_renders_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    font_dir = tmp_path / "fonts"
    font_dir.mkdir()
    shutil.copy(BUNDLED_FONT_PATH, font_dir / "LiberationSans-Regular.ttf")

    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "output.pdf").read_bytes().startswith(b"%PDF")


def test_render_with_preview(tmp_path: Path) -> None:
    out = tmp_path / "march.pdf"
    result = runner.invoke(
        app,
        ["render", "--year", "2024", "--month", "3", "--font", str(BUNDLED_FONT_PATH),
         "--out", str(out), "--preview"],
    )
    assert result.exit_code == 0, result.output
    assert out.exists()
    assert (tmp_path / "march.png").exists()


def test_render_missing_font_fails(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["render"])
    assert result.exit_code == 1
    assert "error:" in result.output
    assert not (tmp_path / "output.pdf").exists()


def test_render_invalid_month_fails(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["render", "--month", "13", "--font", str(BUNDLED_FONT_PATH), "--out", str(tmp_path / "x.pdf")]
    )
    assert result.exit_code == 1
    assert "month must be in 1..12" in result.output


def test_serve_rejects_bad_port(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")
    result = runner.invoke(app, ["serve"])
    assert result.exit_code == 1
    assert "invalid PORT" in result.output


def test_preview_failure_is_reported(tmp_path: Path, monkeypatch) -> None:
    def broken_open(path: str):  # noqa: ARG001 - test helper
        raise RuntimeError("cannot open broken document")

    monkeypatch.setattr("datesheet.pipeline.render_preview.fitz.open", broken_open)
    result = runner.invoke(
        app, ["render", "--font", str(BUNDLED_FONT_PATH), "--out", str(tmp_path / "x.pdf"), "--preview"]
    )
    assert result.exit_code == 1
    assert "error: cannot render preview" in result.output
