from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple, Union

from . import config


@dataclass(frozen=True)
class PageSize:
    width_mm: float
    height_mm: float


A4_LANDSCAPE = PageSize(width_mm=297.0, height_mm=210.0)


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    days: Tuple[date, ...]

    @property
    def row_count(self) -> int:
        return len(self.days)

    @property
    def first_day(self) -> date:
        return self.days[0]

    @property
    def last_day(self) -> date:
        return self.days[-1]


@dataclass(frozen=True)
class PageGeometry:
    """
    Grid positions for one page, in millimetres from the bottom-left corner.

    "table" spans the label strips as well, "body" is the hour grid only.
    """

    page: PageSize
    rows: int
    columns: int
    padding: float
    cell_padding: float
    column_label_height: float
    column_label_font_size: float
    column_header_offset_x: float
    column_header_offset_y: float
    row_label_width: float
    row_height: float
    column_width: float
    row_label_font_size: float
    row_label_offset_y: float
    table_left: float
    table_top: float
    body_left: float
    body_right: float
    body_bottom: float
    body_top: float

    def column_x(self, index: int) -> float:
        return self.body_left + index * self.column_width

    def row_y(self, index: int) -> float:
        """Bottom edge of the band ``index`` boundaries above the body bottom."""
        return self.body_bottom + index * self.row_height

    def band_bottom(self, row_from_top: int) -> float:
        return self.row_y(self.rows - row_from_top - 1)


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float


BLACK = Color(0.0, 0.0, 0.0)
LIGHT_GRAY = Color(config.GRAY_SHADE, config.GRAY_SHADE, config.GRAY_SHADE)


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Tuple[float, float], ...]
    closed: bool = False
    fill: bool = False
    stroke: bool = True
    fill_color: Color = BLACK
    stroke_color: Color = BLACK
    thickness: float = 0.5   # points


@dataclass(frozen=True)
class TextRun:
    text: str
    x: float
    y: float
    font_size: float         # millimetres
    color: Color = BLACK


DrawPrimitive = Union[Polygon, TextRun]
