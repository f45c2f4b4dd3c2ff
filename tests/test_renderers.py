"""Tests for perch.rendering — static, translator and JSON renderers."""

import math
from collections.abc import Mapping
from typing import Any

from conftest import BookTranslator

from perch.errors import ParameterError, TranslationError
from perch.http.params import RequestParams
from perch.http.response import HTML, JSON, PLAIN_TEXT
from perch.rendering.layout import plain_text, render_error, render_ok
from perch.rendering.renderers import (
    JsonRenderer,
    StaticRenderer,
    TranslatorRenderer,
    to_json,
)
from perch.templating.engine import TemplateEngine


class ConstantTranslator:
    def __init__(self, value: Any) -> None:
        self.value = value

    def convert(self, captures: Mapping[str, str]) -> Any:
        return self.value


class RaisingTranslator:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def convert(self, captures: Mapping[str, str]) -> Any:
        raise self.exc


NO_PARAMS = RequestParams()


class TestLayout:
    def test_render_ok(self, engine: TemplateEngine) -> None:
        response = render_ok(engine, "Library - Shelf", "<p>shelf</p>")

        assert response.status == 200
        assert response.content_type == HTML
        assert "<title>Library - Shelf</title>" in response.text
        assert "<p>shelf</p>" in response.text

    def test_render_error_uses_bare_title(self, engine: TemplateEngine) -> None:
        response = render_error(engine, "<p>gone</p>", 410)

        assert response.status == 410
        assert "<title>Library</title>" in response.text
        assert "<p>gone</p>" in response.text

    def test_plain_text(self) -> None:
        response = plain_text("nope", 400)
        assert response.status == 400
        assert response.content_type == PLAIN_TEXT
        assert response.body == "nope"


class TestStaticRenderer:
    def test_title_is_composed(self, engine: TemplateEngine) -> None:
        renderer = StaticRenderer("Index", "<p>Welcome</p>")
        response = renderer.render({}, NO_PARAMS, engine, 1)

        assert response.status == 200
        assert response.content_type == HTML
        assert "<title>Library - Index</title>" in response.text
        assert "<p>Welcome</p>" in response.text

    def test_ignores_captures_and_params(self, engine: TemplateEngine) -> None:
        renderer = StaticRenderer("Index", "<p>Welcome</p>")
        first = renderer.render({}, NO_PARAMS, engine, 1)
        second = renderer.render({"x": "1"}, RequestParams({"q": ["a"]}), engine, 3)
        assert first == second

    def test_content_is_not_escaped(self, engine: TemplateEngine) -> None:
        response = StaticRenderer("T", "<em>raw</em>").render({}, NO_PARAMS, engine, 1)
        assert "<em>raw</em>" in response.text

    def test_repr(self) -> None:
        assert repr(StaticRenderer("Index", "")) == "StaticRenderer('Index')"


class TestTranslatorRenderer:
    def test_success(self, engine: TemplateEngine) -> None:
        renderer = TranslatorRenderer("Book", "book.html", BookTranslator())
        response = renderer.render({"isbn": "9780486284736"}, NO_PARAMS, engine, 2)

        assert response.status == 200
        assert response.content_type == HTML
        assert "<title>Library - Book</title>" in response.text
        assert "<h2>Moby Dick</h2>" in response.text
        assert "Herman Melville" in response.text

    def test_translated_values_are_escaped(self, engine: TemplateEngine) -> None:
        value = {"title": "<script>", "author": "x"}
        renderer = TranslatorRenderer("Book", "book.html", ConstantTranslator(value))
        response = renderer.render({}, NO_PARAMS, engine, 1)
        assert "<script>" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_parameter_error_is_400(self, engine: TemplateEngine) -> None:
        renderer = TranslatorRenderer("T", "book.html", RaisingTranslator(ParameterError("missing id")))
        response = renderer.render({}, NO_PARAMS, engine, 1)

        assert response.status == 400
        assert response.content_type == PLAIN_TEXT
        assert response.body == "missing id"

    def test_translation_error_is_500(self, engine: TemplateEngine) -> None:
        renderer = TranslatorRenderer("T", "book.html", RaisingTranslator(TranslationError("db down")))
        response = renderer.render({}, NO_PARAMS, engine, 1)

        assert response.status == 500
        assert response.content_type == PLAIN_TEXT
        assert response.body == "db down"


class TestJsonRenderer:
    def test_compact_body(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(ConstantTranslator({"x": 1})).render({}, NO_PARAMS, engine, 1)

        assert response.status == 200
        assert response.content_type == JSON
        assert response.body == '{"x":1}'

    def test_dataclass_field_order(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(BookTranslator()).render(
            {"isbn": "9780141439518"}, NO_PARAMS, engine, 3
        )
        assert response.body == (
            '{"isbn":"9780141439518","title":"Pride and Prejudice","author":"Jane Austen"}'
        )

    def test_bypasses_layout(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(ConstantTranslator([1, 2])).render({}, NO_PARAMS, engine, 1)
        assert "<html" not in response.text

    def test_parameter_error(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(BookTranslator()).render({}, NO_PARAMS, engine, 1)
        assert response.status == 400
        assert response.body == "missing isbn"

    def test_translation_error(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(BookTranslator()).render({"isbn": "offline"}, NO_PARAMS, engine, 3)
        assert response.status == 500
        assert response.body == "catalogue unavailable"

    def test_unserializable_value(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(ConstantTranslator(object())).render({}, NO_PARAMS, engine, 1)

        assert response.status == 500
        assert response.content_type == PLAIN_TEXT
        assert "not JSON serializable" in response.text

    def test_nan_is_rejected(self, engine: TemplateEngine) -> None:
        response = JsonRenderer(ConstantTranslator({"x": math.nan})).render(
            {}, NO_PARAMS, engine, 1
        )
        assert response.status == 500
        assert response.content_type == PLAIN_TEXT


class TestToJson:
    def test_unicode_kept(self) -> None:
        assert to_json({"name": "café"}) == '{"name":"café"}'

    def test_nested(self) -> None:
        assert to_json({"a": [1, {"b": None}]}) == '{"a":[1,{"b":null}]}'
