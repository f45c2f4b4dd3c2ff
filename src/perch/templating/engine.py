"""Template engine handed to every renderer.

Wraps a kida ``Environment`` built once at startup. Renderers only ever
call ``render()``; nothing registers templates once the app is frozen.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from kida import Environment

LAYOUT_TEMPLATE = "layout.html"


def template_context(value: Any) -> dict[str, Any]:
    """Turn a translated value into a template context.

    Mappings and dataclass instances expose their fields directly;
    anything else is available as ``value``.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    return {"value": value}


class TemplateEngine:
    """Read-only template registry shared by all requests."""

    __slots__ = ("app_title", "env")

    def __init__(self, env: Environment, app_title: str) -> None:
        self.env = env
        self.app_title = app_title

    def render(self, name: str, value: Any) -> str:
        """Render template *name* against *value*."""
        template = self.env.get_template(name)
        return template.render(template_context(value))

    def page_title(self, title: str) -> str:
        """Compose a page title as ``"<app title> - <title>"``."""
        return f"{self.app_title} - {title}"
