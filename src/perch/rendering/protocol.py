"""Renderer and Translator protocols.

A ``Renderer`` turns a matched request into a ``Response``. A
``Translator`` turns captures into a value (or raises a
``TranslatorError``) without knowing how that value will be shown;
``TranslatorRenderer`` and ``JsonRenderer`` bridge the two.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from perch._internal.multimap import MultiValueMapping
from perch.http.response import Response
from perch.templating.engine import TemplateEngine


@runtime_checkable
class Renderer(Protocol):
    """Produce a response for one matched request.

    Args:
        captures: Named captures from the route pattern, percent-decoded.
        params: Query string and form parameters of the request.
        engine: The shared, read-only template engine.
        depth: Number of segments in the request path.
    """

    def render(
        self,
        captures: Mapping[str, str],
        params: MultiValueMapping,
        engine: TemplateEngine,
        depth: int,
    ) -> Response: ...


@runtime_checkable
class Translator[T](Protocol):
    """Convert captures into a serializable value.

    Raise ``ParameterError`` for missing or malformed input and
    ``TranslationError`` when a backing lookup fails.
    """

    def convert(self, captures: Mapping[str, str]) -> T: ...
