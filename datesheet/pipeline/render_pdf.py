from __future__ import annotations

import io
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, Union

from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from ..errors import DatesheetError, RenderError
from ..models import DrawPrimitive, PageSize, Polygon, TextRun
from .fonts import FontSource, load_font
from .layout import build_layout


logger = logging.getLogger(__name__)


def _draw_polygon(canv: canvas.Canvas, shape: Polygon) -> None:
    canv.setLineWidth(shape.thickness)
    canv.setStrokeColorRGB(shape.stroke_color.red, shape.stroke_color.green, shape.stroke_color.blue)
    canv.setFillColorRGB(shape.fill_color.red, shape.fill_color.green, shape.fill_color.blue)

    path = canv.beginPath()
    (x0, y0), *rest = shape.points
    path.moveTo(x0 * mm, y0 * mm)
    for x, y in rest:
        path.lineTo(x * mm, y * mm)
    if shape.closed:
        path.close()
    canv.drawPath(path, stroke=int(shape.stroke), fill=int(shape.fill))


def _draw_text(canv: canvas.Canvas, run: TextRun, font_name: str) -> None:
    canv.setFillColorRGB(run.color.red, run.color.green, run.color.blue)
    canv.setFont(font_name, run.font_size * mm)
    canv.drawString(run.x * mm, run.y * mm, run.text)


def render_pdf(
    primitives: Iterable[DrawPrimitive],
    page: PageSize,
    font_name: str,
    title: str = "Datesheet",
) -> bytes:
    """Draw ``primitives`` in order on a single page and return the PDF bytes."""
    buffer = io.BytesIO()
    try:
        canv = canvas.Canvas(buffer, pagesize=(page.width_mm * mm, page.height_mm * mm))
        canv.setTitle(title)
        for primitive in primitives:
            if isinstance(primitive, Polygon):
                _draw_polygon(canv, primitive)
            elif isinstance(primitive, TextRun):
                _draw_text(canv, primitive, font_name)
            else:
                raise RenderError(f"unknown primitive: {primitive!r}")
        canv.showPage()
        canv.save()
    except DatesheetError:
        raise
    except Exception as exc:
        raise RenderError(f"cannot render PDF: {exc}") from exc
    return buffer.getvalue()


def render_month(start: date, page: PageSize, font: Union[FontSource, str]) -> bytes:
    """
    Render the datesheet for ``start``'s month.

    ``font`` is a FontSource to load, or the name of a font already registered
    with ReportLab (the server loads its font once at startup).
    """
    font_name = load_font(font) if isinstance(font, FontSource) else font
    primitives = build_layout(start, page)
    data = render_pdf(primitives, page, font_name, title=f"Datesheet {start:%Y-%m}")
    logger.info("Rendered datesheet %s (%d bytes)", f"{start:%Y-%m}", len(data))
    return data


def write_pdf(data: bytes, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    return output_path
