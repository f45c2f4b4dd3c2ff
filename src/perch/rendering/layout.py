"""Response builders — layout pages, error pages, plain text.

Every HTML response goes through the ``layout.html`` template with a
``LayoutPage`` as its only context. The layout is validated at startup,
so rendering it here is not expected to fail.
"""

from dataclasses import dataclass

from kida.utils.html import Markup

from perch.http.response import HTML, PLAIN_TEXT, Response
from perch.templating.engine import LAYOUT_TEMPLATE, TemplateEngine


@dataclass(frozen=True, slots=True)
class LayoutPage:
    """The value passed into the layout template."""

    title: str
    body: Markup


def render_ok(engine: TemplateEngine, title: str, body: str) -> Response:
    """Wrap *body* in the layout under *title*; 200 HTML."""
    html = engine.render(LAYOUT_TEMPLATE, LayoutPage(title=title, body=Markup(body)))
    return Response(body=html, status=200, content_type=HTML)


def render_error(engine: TemplateEngine, body: str, status: int) -> Response:
    """Wrap an error *body* in the layout under the bare app title."""
    page = LayoutPage(title=engine.app_title, body=Markup(body))
    return Response(body=engine.render(LAYOUT_TEMPLATE, page), status=status, content_type=HTML)


def plain_text(message: str, status: int) -> Response:
    """A plain-text response that bypasses the layout."""
    return Response(body=message, status=status, content_type=PLAIN_TEXT)
