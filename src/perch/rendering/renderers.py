"""Concrete renderers: static pages, templated translators, JSON.

``TranslatorError`` subclasses map to plain-text responses carrying the
translator's message: ``ParameterError`` -> 400, ``TranslationError`` -> 500.
"""

import dataclasses
import json as json_module
from collections.abc import Mapping
from typing import Any

from perch.errors import TranslatorError
from perch._internal.multimap import MultiValueMapping
from perch.http.response import JSON, Response
from perch.rendering.layout import plain_text, render_ok
from perch.rendering.protocol import Translator
from perch.templating.engine import TemplateEngine


def _translator_error(exc: TranslatorError) -> Response:
    return plain_text(exc.message, exc.status)


def _json_default(value: Any) -> Any:
    """Serialize dataclass instances field by field; reject everything else."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def to_json(value: Any) -> str:
    """Compact JSON encoding; key order follows the value's own order."""
    return json_module.dumps(
        value,
        default=_json_default,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


class StaticRenderer:
    """Fixed HTML content under a fixed title. Always succeeds."""

    __slots__ = ("content", "title")

    def __init__(self, title: str, content: str) -> None:
        self.title = title
        self.content = content

    def render(
        self,
        captures: Mapping[str, str],
        params: MultiValueMapping,
        engine: TemplateEngine,
        depth: int,
    ) -> Response:
        return render_ok(engine, engine.page_title(self.title), self.content)

    def __repr__(self) -> str:
        return f"StaticRenderer({self.title!r})"


class TranslatorRenderer[T]:
    """Render a translated value through a named template inside the layout."""

    __slots__ = ("template", "title", "translator")

    def __init__(self, title: str, template: str, translator: Translator[T]) -> None:
        self.title = title
        self.template = template
        self.translator = translator

    def render(
        self,
        captures: Mapping[str, str],
        params: MultiValueMapping,
        engine: TemplateEngine,
        depth: int,
    ) -> Response:
        try:
            value = self.translator.convert(captures)
        except TranslatorError as exc:
            return _translator_error(exc)
        body = engine.render(self.template, value)
        return render_ok(engine, engine.page_title(self.title), body)

    def __repr__(self) -> str:
        return f"TranslatorRenderer({self.title!r}, {self.template!r})"


class JsonRenderer[T]:
    """Serialize a translated value as JSON, bypassing the layout."""

    __slots__ = ("translator",)

    def __init__(self, translator: Translator[T]) -> None:
        self.translator = translator

    def render(
        self,
        captures: Mapping[str, str],
        params: MultiValueMapping,
        engine: TemplateEngine,
        depth: int,
    ) -> Response:
        try:
            value = self.translator.convert(captures)
        except TranslatorError as exc:
            return _translator_error(exc)
        try:
            body = to_json(value)
        except (TypeError, ValueError) as exc:
            return plain_text(str(exc), 500)
        return Response(body=body, status=200, content_type=JSON)

    def __repr__(self) -> str:
        return f"JsonRenderer({self.translator!r})"
