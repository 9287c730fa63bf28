from __future__ import annotations

import logging
import time
from datetime import date, datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from . import config
from .errors import CalendarError, DatesheetError
from .models import A4_LANDSCAPE, PageSize
from .pipeline.calendar import month_for
from .pipeline.fonts import FontSource, load_font
from .pipeline.render_pdf import render_month
from .storage import datesheet_filename


logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _parse_int(label: str, raw: str) -> int:
    # int() would also take "1_2", "+3", " 4" and non-ASCII digits
    if not (raw.isascii() and raw.isdigit()):
        raise CalendarError(f"invalid {label}: {raw!r}")
    return int(raw)


def _error_response(exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(f"error: {exc}", status_code=500)


def default_font_source() -> FontSource:
    path = config.get_font_path()
    if path is not None:
        return FontSource.from_path(path)
    return FontSource.bundled()


def create_app(font: Optional[FontSource] = None, page: PageSize = A4_LANDSCAPE) -> FastAPI:
    """
    Build the HTTP shell.

    The font is loaded here, once, and shared read-only by every request.
    """
    font_name = load_font(font or default_font_source())

    app = FastAPI(title="datesheet", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.font_name = font_name
    app.state.page = page

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "method=%s path=%s status=%d latency_ms=%.1f",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.get("/")
    def index() -> RedirectResponse:
        today = utc_today()
        return RedirectResponse(f"/{today.year}/{today.month:02d}", status_code=302)

    @app.get("/{year}/{month}")
    def datesheet(year: str, month: str) -> Response:
        try:
            y = _parse_int("year", year)
            m = _parse_int("month", month)
            calendar_month = month_for(y, m)
            data = render_month(calendar_month.first_day, app.state.page, app.state.font_name)
        except DatesheetError as exc:
            logger.warning("Cannot render /%s/%s: %s", year, month, exc)
            return _error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error rendering /%s/%s", year, month)
            return _error_response(exc)

        return Response(
            content=data,
            media_type="application/pdf",
            headers={"Content-Disposition": f'filename="{datesheet_filename(y, m)}"'},
        )

    return app


def run_server(port: Optional[int] = None) -> None:
    port = port or config.get_port()
    app = create_app()
    uvicorn.run(app, host=config.HOST, port=port)
