"""Core rendering components: input assembly, date formatting and HTML composition."""

from __future__ import annotations

from .assembler import ResolvedDocument, assemble, pick
from .compositor import HtmlCompositor, escape_html
from .dates import format_date_range, format_month_year
from .labels import Labels, labels_for

__all__ = [
    "HtmlCompositor",
    "Labels",
    "ResolvedDocument",
    "assemble",
    "escape_html",
    "format_date_range",
    "format_month_year",
    "labels_for",
    "pick",
]
