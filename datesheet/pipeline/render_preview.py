from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from ..errors import RenderError


def _render_page_to_png(doc: fitz.Document, page_index: int, out_path: Path, min_px: int) -> None:
    page = doc.load_page(page_index)

    # scale so the short side of the bitmap has at least min_px pixels
    rect = page.rect
    short_side = min(rect.width, rect.height)
    zoom = max(1.0, min_px / float(short_side))
    mat = fitz.Matrix(zoom, zoom)

    pix = page.get_pixmap(matrix=mat, alpha=False)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pix.save(str(out_path))


def render_preview(pdf_path: Path, out_path: Path, min_px: int = 1600) -> Path:
    """Rasterize the (single) datesheet page to a PNG next to the PDF."""
    try:
        with fitz.open(str(pdf_path)) as doc:
            if doc.page_count < 1:
                raise RenderError(f"{pdf_path} has no pages")
            _render_page_to_png(doc, 0, out_path, min_px)
    except (RuntimeError, ValueError, OSError) as exc:
        # fitz.FileDataError and friends derive from RuntimeError
        raise RenderError(f"cannot render preview of {pdf_path}: {exc}") from exc
    return out_path
