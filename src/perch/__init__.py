"""Perch — a minimal web-application scaffold.

Requests are matched against an ordered list of path patterns and
dispatched to renderers that produce layout-wrapped HTML pages or JSON.

Basic usage::

    from perch import App

    app = App()
    app.add_static("", "Index", "<p>Hello, World!</p>")

    @app.json("api/users/:id")
    def user(id: str) -> dict[str, str]:
        return {"id": id}

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "FunctionTranslator",
    "HTTPError",
    "JsonRenderer",
    "NotFound",
    "ParameterError",
    "PerchError",
    "Renderer",
    "Request",
    "RequestParams",
    "Response",
    "StaticRenderer",
    "TemplateEngine",
    "TranslationError",
    "Translator",
    "TranslatorError",
    "TranslatorRenderer",
]

_ERRORS = (
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "ParameterError",
    "PerchError",
    "TranslationError",
    "TranslatorError",
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "App":
        from perch.app import App

        return App

    if name == "AppConfig":
        from perch.config import AppConfig

        return AppConfig

    if name == "Request":
        from perch.http.request import Request

        return Request

    if name == "RequestParams":
        from perch.http.params import RequestParams

        return RequestParams

    if name == "Response":
        from perch.http.response import Response

        return Response

    if name == "TemplateEngine":
        from perch.templating.engine import TemplateEngine

        return TemplateEngine

    if name in ("Renderer", "Translator"):
        from perch.rendering import protocol as _protocol

        return getattr(_protocol, name)

    if name in ("JsonRenderer", "StaticRenderer", "TranslatorRenderer"):
        from perch.rendering import renderers as _renderers

        return getattr(_renderers, name)

    if name == "FunctionTranslator":
        from perch.rendering.translators import FunctionTranslator

        return FunctionTranslator

    if name in _ERRORS:
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
