"""Kida environment setup and startup validation.

Creates the template engine from perch's AppConfig and the templates
registered on the app. Runs once during ``App._freeze()``; any missing
or malformed template is a ``ConfigurationError`` so the server never
starts with a broken layout.
"""

from collections.abc import Iterable
from importlib.resources import files
from pathlib import Path

from kida import ChoiceLoader, DictLoader, Environment, FileSystemLoader, PackageLoader
from kida.environment.exceptions import (
    TemplateNotFoundError,
    TemplateRuntimeError,
    TemplateSyntaxError,
    UndefinedError,
)
from kida.utils.html import Markup

from perch.config import AppConfig
from perch.errors import ConfigurationError
from perch.templating.engine import LAYOUT_TEMPLATE, TemplateEngine

_TEMPLATE_ERRORS = (
    TemplateNotFoundError,
    TemplateSyntaxError,
    TemplateRuntimeError,
    UndefinedError,
)


def read_default(name: str) -> str:
    """Read one of perch's bundled pages (``layout.html``, ``not_found.html``, ...)."""
    return (files("perch.templating") / "defaults" / name).read_text(encoding="utf-8")


def create_engine(
    config: AppConfig,
    templates: dict[str, str],
    required: Iterable[str] = (),
) -> TemplateEngine:
    """Build and validate the template engine.

    Lookup order: templates registered with ``app.add_template()``, then
    ``config.template_dir`` (when it exists), then the bundled defaults,
    so either of the first two can replace ``layout.html``.
    Every registered template and every name in *required* must load.
    """
    loaders = [DictLoader(dict(templates))]
    template_dir = Path(config.template_dir)
    if template_dir.is_dir():
        loaders.append(FileSystemLoader(str(template_dir)))
    loaders.append(PackageLoader("perch.templating", "defaults"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
    engine = TemplateEngine(env, config.title)

    for name in dict.fromkeys([LAYOUT_TEMPLATE, *templates, *required]):
        try:
            env.get_template(name)
        except _TEMPLATE_ERRORS as exc:
            msg = f"{name} is not a valid template: {exc}"
            raise ConfigurationError(msg) from exc

    try:
        engine.render(LAYOUT_TEMPLATE, {"title": config.title, "body": Markup("")})
    except _TEMPLATE_ERRORS as exc:
        msg = f"Could not render layout: {exc}"
        raise ConfigurationError(msg) from exc

    return engine
