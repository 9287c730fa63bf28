from __future__ import annotations

from datetime import date
from typing import List

from .. import config
from ..models import (
    LIGHT_GRAY,
    DrawPrimitive,
    PageGeometry,
    PageSize,
    Polygon,
    TextRun,
)
from .calendar import month_days, row_label


def compute_geometry(page: PageSize, rows: int) -> PageGeometry:
    padding = config.PAGE_PADDING_MM
    label_h = config.COLUMN_LABEL_HEIGHT_MM
    label_w = config.ROW_LABEL_WIDTH_MM
    columns = config.TABLE_COLUMNS

    effective_w = page.width_mm - padding * 2
    effective_h = page.height_mm - padding * 2

    table_h = effective_h - label_h
    table_w = effective_w - label_w
    row_h = table_h / rows
    col_w = table_w / columns

    row_font = row_h * config.ROW_LABEL_FONT_RATIO
    col_font = config.COLUMN_LABEL_FONT_SIZE_MM

    body_left = padding + label_w
    body_bottom = padding

    return PageGeometry(
        page=page,
        rows=rows,
        columns=columns,
        padding=padding,
        cell_padding=config.CELL_PADDING_MM,
        column_label_height=label_h,
        column_label_font_size=col_font,
        column_header_offset_x=config.COLUMN_HEADER_OFFSET_X_MM,
        column_header_offset_y=(label_h - col_font) / 2,
        row_label_width=label_w,
        row_height=row_h,
        column_width=col_w,
        row_label_font_size=row_font,
        row_label_offset_y=(row_h - row_font) / 2,
        table_left=padding,
        table_top=page.height_mm - padding,
        body_left=body_left,
        body_right=body_left + table_w,
        body_bottom=body_bottom,
        body_top=body_bottom + table_h,
    )


def is_thick_column(index: int, columns: int = config.TABLE_COLUMNS) -> bool:
    # the closing boundary stays thin even though it divides evenly
    return index < columns and index % config.THICK_COLUMN_EVERY == 0


def column_boundaries_thick(geometry: PageGeometry) -> List[bool]:
    return [is_thick_column(i, geometry.columns) for i in range(geometry.columns + 1)]


def _line(x0: float, y0: float, x1: float, y1: float, thickness: float = config.THIN_LINE_PT) -> Polygon:
    return Polygon(points=((x0, y0), (x1, y1)), thickness=thickness)


def _rect(left: float, bottom: float, right: float, top: float, **style) -> Polygon:
    return Polygon(
        points=((left, bottom), (left, top), (right, top), (right, bottom)),
        closed=True,
        **style,
    )


def _frame(g: PageGeometry) -> List[DrawPrimitive]:
    return [
        _rect(g.body_left, g.body_bottom, g.body_right, g.body_top, thickness=config.THIN_LINE_PT),
        _line(g.table_left, g.body_bottom, g.table_left, g.body_top),
        _line(g.body_left, g.table_top, g.body_right, g.table_top),
    ]


def _row_shading(g: PageGeometry) -> List[DrawPrimitive]:
    shapes: List[DrawPrimitive] = []
    for row in range(0, g.rows, 2):
        y0 = g.band_bottom(row)
        shapes.append(
            _rect(
                g.table_left,
                y0,
                g.body_right,
                y0 + g.row_height,
                fill=True,
                stroke=False,
                fill_color=LIGHT_GRAY,
            )
        )
    return shapes


def _column_dividers(g: PageGeometry) -> List[DrawPrimitive]:
    shapes: List[DrawPrimitive] = []
    for i, thick in enumerate(column_boundaries_thick(g)):
        x = g.column_x(i)
        width = config.THICK_LINE_PT if thick else config.THIN_LINE_PT
        shapes.append(_line(x, g.body_bottom, x, g.table_top, thickness=width))
    return shapes


def _row_dividers(g: PageGeometry) -> List[DrawPrimitive]:
    return [
        _line(g.table_left, g.row_y(i), g.body_right, g.row_y(i))
        for i in range(g.rows + 1)
    ]


def _column_labels(g: PageGeometry) -> List[DrawPrimitive]:
    y = g.body_top + g.cell_padding + g.column_header_offset_y
    return [
        TextRun(
            text=f"{hour:02d}",
            x=g.column_x(hour) + g.cell_padding + g.column_header_offset_x,
            y=y,
            font_size=g.column_label_font_size,
        )
        for hour in range(g.columns)
    ]


def _row_labels(g: PageGeometry, days: List[date]) -> List[DrawPrimitive]:
    x = g.table_left + g.cell_padding
    return [
        TextRun(
            text=row_label(day),
            x=x,
            y=g.band_bottom(index) + g.cell_padding + g.row_label_offset_y,
            font_size=g.row_label_font_size,
        )
        for index, day in enumerate(days)
    ]


def build_layout(start: date, page: PageSize) -> List[DrawPrimitive]:
    """
    Every shape and label of the datesheet for ``start``'s month, in paint order.

    Later primitives overpaint earlier ones where they touch, so the order is
    frame, shading, column dividers, row dividers, hour labels, day labels.
    """
    month = month_days(start)
    g = compute_geometry(page, month.row_count)
    return (
        _frame(g)
        + _row_shading(g)
        + _column_dividers(g)
        + _row_dividers(g)
        + _column_labels(g)
        + _row_labels(g, list(month.days))
    )
