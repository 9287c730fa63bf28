from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import config
from .errors import DatesheetError
from .models import A4_LANDSCAPE
from .pipeline.calendar import month_for
from .pipeline.fonts import FontSource
from .pipeline.render_pdf import render_month, write_pdf
from .pipeline.render_preview import render_preview
from .server import run_server
from .storage import preview_path_for

app = typer.Typer(help="Render one-month hour-grid calendars as PDF")


def _fail(exc: Exception) -> None:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        render(
            year=config.DEFAULT_YEAR,
            month=config.DEFAULT_MONTH,
            font=config.DEFAULT_FONT_PATH,
            out=config.DEFAULT_OUTPUT,
            preview=False,
        )


@app.command()
def render(
    year: int = typer.Option(config.DEFAULT_YEAR, "--year", help="Calendar year"),
    month: int = typer.Option(config.DEFAULT_MONTH, "--month", help="Calendar month (1-12)"),
    font: Path = typer.Option(config.DEFAULT_FONT_PATH, "--font", help="TrueType font file"),
    out: Path = typer.Option(config.DEFAULT_OUTPUT, "--out", help="Output PDF path"),
    preview: bool = typer.Option(False, "--preview", help="Also write a PNG preview next to the PDF"),
) -> None:
    try:
        calendar_month = month_for(year, month)
        data = render_month(calendar_month.first_day, A4_LANDSCAPE, FontSource.from_path(font))
        write_pdf(data, out)
        if preview:
            render_preview(out, preview_path_for(out))
    except (DatesheetError, OSError) as exc:
        _fail(exc)
    typer.echo(f"Wrote {out}")


@app.command()
def serve(
    port: Optional[int] = typer.Option(None, "--port", help=f"Overrides ${config.PORT_ENV}"),
) -> None:
    try:
        run_server(port)
    except DatesheetError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
