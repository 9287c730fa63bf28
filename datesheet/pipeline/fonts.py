from __future__ import annotations

import hashlib
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import reportlab
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from ..errors import FontLoadError


logger = logging.getLogger(__name__)

# ReportLab wheels ship Bitstream Vera alongside the package
BUNDLED_FONT_PATH = Path(reportlab.__file__).resolve().parent / "fonts" / "Vera.ttf"


@dataclass(frozen=True)
class FontSource:
    """A TrueType font given either as a file path or as raw bytes."""

    name: str
    path: Optional[Path] = None
    data: Optional[bytes] = None

    @classmethod
    def from_path(cls, path: Path | str, name: str | None = None) -> "FontSource":
        path = Path(path)
        if name is None:
            # same stem in another directory is another font
            digest = hashlib.sha1(str(path.resolve()).encode("utf-8")).hexdigest()[:8]
            name = f"Datesheet-{path.stem}-{digest}"
        return cls(name=name, path=path)

    @classmethod
    def from_bytes(cls, data: bytes, name: str) -> "FontSource":
        return cls(name=name, data=data)

    @classmethod
    def bundled(cls) -> "FontSource":
        try:
            data = BUNDLED_FONT_PATH.read_bytes()
        except OSError as exc:
            raise FontLoadError(f"bundled font missing: {BUNDLED_FONT_PATH}") from exc
        return cls.from_bytes(data, "Datesheet-Vera")


def load_font(source: FontSource) -> str:
    """
    Parse ``source`` and register it with ReportLab, returning the font name.

    Registration is global to the process; a name already registered is reused.
    """
    if source.path is not None and source.data is None and not source.path.is_file():
        raise FontLoadError(f"font file not found: {source.path}")
    if source.name in pdfmetrics.getRegisteredFontNames():
        return source.name

    if source.data is not None:
        handle = io.BytesIO(source.data)
        origin = f"<{len(source.data)} bytes>"
    elif source.path is not None:
        handle = str(source.path)
        origin = str(source.path)
    else:
        raise FontLoadError(f"font {source.name!r} has neither a path nor data")

    try:
        font = TTFont(source.name, handle)
    except (TTFError, OSError) as exc:
        raise FontLoadError(f"cannot load font {origin}: {exc}") from exc

    pdfmetrics.registerFont(font)
    logger.info("Registered font %s from %s", source.name, origin)
    return source.name
