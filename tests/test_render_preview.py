from __future__ import annotations

from datetime import date
from pathlib import Path

import fitz
import pytest

from datesheet.errors import RenderError
from datesheet.models import A4_LANDSCAPE
from datesheet.pipeline.fonts import FontSource
from datesheet.pipeline.render_pdf import render_month, write_pdf
from datesheet.pipeline.render_preview import render_preview
from datesheet.storage import preview_path_for


class DummyPixmap:
    def save(self, path: str) -> None:
        Path(path).write_text("preview", encoding="utf-8")


class DummyPage:
    rect = fitz.Rect(0, 0, 841.89, 595.28)

    def get_pixmap(self, matrix=None, alpha=True) -> DummyPixmap:  # noqa: ARG002 - signature matches fitz
        return DummyPixmap()


class DummyDoc:
    def __init__(self) -> None:
        self.page_count = 1
        self.closed = False

    def __enter__(self) -> "DummyDoc":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001 - test helper
        self.closed = True

    def load_page(self, index: int) -> DummyPage:  # noqa: ARG002 - test helper
        return DummyPage()


def test_render_preview_closes_document(monkeypatch, tmp_path: Path) -> None:
    doc = DummyDoc()

    def fake_open(path: str) -> DummyDoc:  # noqa: ARG001 - test helper
        return doc

    monkeypatch.setattr("datesheet.pipeline.render_preview.fitz.open", fake_open)
    preview = render_preview(Path("sample.pdf"), tmp_path / "sample.png")
    assert doc.closed is True
    assert preview.exists()


def test_render_preview_png(tmp_path: Path) -> None:
    pdf_path = write_pdf(
        render_month(date(2023, 1, 1), A4_LANDSCAPE, FontSource.bundled()),
        tmp_path / "datesheet.pdf",
    )
    preview = render_preview(pdf_path, preview_path_for(pdf_path), min_px=400)
    assert preview == tmp_path / "datesheet.png"
    assert preview.read_bytes().startswith(b"\x89PNG")


def test_render_preview_unreadable_pdf(tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"not a pdf at all")
    with pytest.raises(RenderError):
        render_preview(broken, tmp_path / "broken.png")
    assert not (tmp_path / "broken.png").exists()
