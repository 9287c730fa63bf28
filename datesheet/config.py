from __future__ import annotations

import os
from pathlib import Path

from .errors import ConfigError


BASE_DIR = Path(__file__).resolve().parents[1]
DEFAULT_FONT_PATH = Path("fonts") / "LiberationSans-Regular.ttf"
DEFAULT_OUTPUT = Path("output.pdf")

DEFAULT_YEAR = 2023
DEFAULT_MONTH = 1

# Page layout, all lengths in millimetres
PAGE_PADDING_MM = 5.0
CELL_PADDING_MM = 1.0
COLUMN_LABEL_HEIGHT_MM = 7.0
COLUMN_LABEL_FONT_SIZE_MM = 5.0
COLUMN_HEADER_OFFSET_X_MM = 1.0
ROW_LABEL_WIDTH_MM = 50.0
ROW_LABEL_FONT_RATIO = 0.75

TABLE_COLUMNS = 24
THICK_COLUMN_EVERY = 6

# Stroke widths in points
THIN_LINE_PT = 0.5
THICK_LINE_PT = 1.0

GRAY_SHADE = 0.9

HOST = "0.0.0.0"
DEFAULT_PORT = 8000
PORT_ENV = "PORT"
FONT_ENV = "DATESHEET_FONT"


def get_port(environ: dict | None = None) -> int:
    env = os.environ if environ is None else environ
    raw = env.get(PORT_ENV)
    if raw is None or raw == "":
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError as exc:
        raise ConfigError(f"invalid {PORT_ENV} value: {raw!r}") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"{PORT_ENV} out of range: {port}")
    return port


def get_font_path(environ: dict | None = None) -> Path | None:
    env = os.environ if environ is None else environ
    raw = env.get(FONT_ENV)
    return Path(raw) if raw else None
