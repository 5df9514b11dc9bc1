"""Compose the printable résumé HTML from a resolved document."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined
from markupsafe import Markup, escape

from ..schemas import Locale
from .assembler import ResolvedDocument

DEFAULT_FONT_URL = (
    "https://fonts.googleapis.com/css2?family=Noto+Sans+Bengali:wght@400;500;600;700"
    "&family=Inter:wght@400;500;600;700&display=swap"
)

_FONT_FAMILIES: dict[Locale, str] = {
    Locale.BN: "'Noto Sans Bengali', sans-serif",
    Locale.EN: "'Inter', sans-serif",
}

# markupsafe spells quotes numerically; the printed template uses these forms.
_QUOTE_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&#34;", "&quot;"),
    ("&#39;", "&#039;"),
)


def escape_html(value: Any) -> Markup:
    """Escape a value for insertion into markup; ``None`` becomes ``""``."""
    if value is None:
        return Markup("")
    if isinstance(value, Markup):
        return value
    text = str(escape(value))
    for entity, spelling in _QUOTE_ENTITIES:
        text = text.replace(entity, spelling)
    return Markup(text)


def _build_environment() -> Environment:
    # ``finalize`` runs on every ``{{ }}`` output, so all values pass through
    # escape_html before autoescape sees them.
    env = Environment(
        loader=PackageLoader("porichoy", "templates"),
        autoescape=True,
        finalize=escape_html,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["stars"] = lambda count: "★" * int(count or 0)
    return env


class HtmlCompositor:
    """Render resolved documents through the bundled Jinja2 template."""

    template_name = "resume.html.j2"

    def __init__(self, *, font_url: str | None = None) -> None:
        self._font_url = font_url or DEFAULT_FONT_URL
        self._template = _build_environment().get_template(self.template_name)

    def compose(self, document: ResolvedDocument) -> str:
        return self._template.render(
            doc=document,
            labels=document.labels,
            lang=document.locale.value,
            font_url=self._font_url,
            font_family=Markup(_FONT_FAMILIES[document.locale]),
        )


__all__ = ["DEFAULT_FONT_URL", "HtmlCompositor", "escape_html"]
