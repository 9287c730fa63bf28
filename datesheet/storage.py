from __future__ import annotations

from pathlib import Path


ARTIFACT_SUFFIXES = {
    "pdf": ".pdf",
    "preview": ".png",
}


def datesheet_filename(year: int, month: int, artifact_type: str = "pdf") -> str:
    return f"datesheet-{year:04d}-{month:02d}{ARTIFACT_SUFFIXES[artifact_type]}"


def preview_path_for(pdf_path: Path) -> Path:
    return pdf_path.with_suffix(ARTIFACT_SUFFIXES["preview"])
