"""Perch application class.

Mutable during setup (route and template registration).
Frozen at runtime when app.run() or __call__() is first invoked.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from perch._internal.asgi import Receive, Scope, Send
from perch.config import AppConfig
from perch.errors import ConfigurationError, NotFound
from perch.http.request import Request
from perch.http.response import Response
from perch.rendering.layout import plain_text, render_error
from perch.rendering.protocol import Renderer, Translator
from perch.rendering.renderers import JsonRenderer, StaticRenderer, TranslatorRenderer
from perch.rendering.translators import FunctionTranslator
from perch.routing.route import Route
from perch.routing.router import Router
from perch.server.handler import handle_request
from perch.templating.engine import TemplateEngine
from perch.templating.integration import create_engine, read_default

logger = logging.getLogger("perch.app")


class App:
    """The perch application.

    Routes are tried in registration order; the first pattern that
    matches the request path handles it::

        app = App(AppConfig(title="Library"))
        app.add_static("", "Index", "<p>Welcome</p>")
        app.add_template("book.html", "<h2>{{ title }}</h2>")

        @app.translator("books/:isbn", title="Book", template="book.html")
        def book(isbn: str) -> Book:
            ...

    Thread safety:
        The setup phase is single-threaded. The freeze transition uses a
        Lock + double-check so exactly one thread compiles the app. After
        that, the route table and template engine are only ever read.
    """

    __slots__ = (
        "_engine",
        "_freeze_lock",
        "_frozen",
        "_not_found",
        "_pending_routes",
        "_router",
        "_templates",
        "config",
    )

    def __init__(self, config: AppConfig | None = None, *, not_found: str | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[Route] = []
        self._templates: dict[str, str] = {}
        self._not_found: str | None = not_found
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._router: Router | None = None
        self._engine: TemplateEngine | None = None

    # -- Route registration --

    def add_static(self, path: str, title: str, content: str | bytes) -> None:
        """Serve fixed HTML *content* at *path*, titled ``"<app title> - <title>"``."""
        self._check_not_frozen()
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as exc:
                msg = f"Static content for {path!r} is not valid UTF-8"
                raise ConfigurationError(msg) from exc
        self.add_renderer(path, StaticRenderer(title, content))

    def add_renderer(self, path: str, renderer: Renderer) -> None:
        """Bind any renderer to *path*."""
        self._check_not_frozen()
        self._pending_routes.append(Route(path, renderer))

    def add_translator[T](
        self,
        path: str,
        title: str,
        template: str,
        translator: Translator[T],
    ) -> None:
        """Render the translator's value with *template* inside the layout."""
        self.add_renderer(path, TranslatorRenderer(title, template, translator))

    def add_json[T](self, path: str, translator: Translator[T]) -> None:
        """Serve the translator's value as JSON."""
        self.add_renderer(path, JsonRenderer(translator))

    def translator(
        self,
        path: str,
        *,
        title: str,
        template: str,
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a function as a templated translator via decorator.

        The function's parameters are filled from the route's captures.
        """

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add_translator(path, title, template, FunctionTranslator(func))
            return func

        return decorator

    def json(self, path: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register a function as a JSON translator via decorator."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.add_json(path, FunctionTranslator(func))
            return func

        return decorator

    # -- Template registration --

    def add_template(self, name: str, source: str | bytes) -> None:
        """Register template text under *name* (overrides ``template_dir``)."""
        self._check_not_frozen()
        if isinstance(source, bytes):
            try:
                source = source.decode("utf-8")
            except UnicodeDecodeError as exc:
                msg = f"{name} is not valid UTF-8"
                raise ConfigurationError(msg) from exc
        self._templates[name] = source

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in priority order."""
        if self._router is not None:
            return self._router.routes
        return tuple(self._pending_routes)

    # -- Dispatch --

    def dispatch(self, request: Request) -> Response:
        """Route *request* to the first matching renderer.

        Never raises for per-request failures: no match is a 404 page,
        translator errors are 400/500 plain text, and anything else a
        renderer raises is logged and becomes a 500.
        """
        self._ensure_frozen()
        assert self._router is not None
        assert self._engine is not None

        try:
            match = self._router.match(request.segments)
        except NotFound:
            return render_error(self._engine, self._not_found or "", 404)

        renderer = match.route.renderer
        try:
            return renderer.render(match.captures, request.params, self._engine, request.depth)
        except Exception:
            logger.exception("500 %s %s", request.method, request.path)
            return plain_text("Internal Server Error", 500)

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with pounce.

        Template problems surface here as ``ConfigurationError`` before
        the server binds.
        """
        self._ensure_frozen()

        from perch.server.dev import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            workers=self.config.workers,
            reload=self.config.debug,
            log_level=self.config.log_level,
            log_format=self.config.log_format,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, dispatch=self.dispatch)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so an invalid layout or template
        fails the server start instead of the first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except ConfigurationError as exc:
                    logger.error("Startup failed: %s", exc)
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking.

        Multiple ASGI worker threads could call __call__() concurrently
        on first request; exactly one of them compiles the app.
        """
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. Compile route table
        router = Router()
        for route in self._pending_routes:
            router.add(route)
        router.compile()

        # 2. Build and validate templates (fatal on error)
        required = [
            route.renderer.template
            for route in router.routes
            if isinstance(route.renderer, TranslatorRenderer)
        ]
        engine = create_engine(self.config, self._templates, required)

        if self._not_found is None:
            self._not_found = read_default("not_found.html")
        self._router = router
        self._engine = engine
        self._frozen = True
        logger.info("%s frozen with %d routes", self.config.title, len(router.routes))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and templates before calling app.run()."
            )
            raise RuntimeError(msg)
