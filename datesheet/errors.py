from __future__ import annotations


class DatesheetError(Exception):
    """Base class for every failure that aborts a render."""


class CalendarError(DatesheetError):
    """Year/month out of range, or day enumeration ran past ``date.max``."""


class FontLoadError(DatesheetError):
    pass


class RenderError(DatesheetError):
    """ReportLab could not draw or serialize the page."""


class ConfigError(DatesheetError):
    pass
