"""Ordered router with first-match-wins linear matching.

Registration order is the priority order: when two patterns could both
match a path, the one added first is selected. The table is a plain
tuple after ``compile()`` and is read without locks by every worker.
"""

import logging
from collections.abc import Sequence

from perch.errors import NotFound
from perch.routing.pattern import match_path, split_path
from perch.routing.route import Route, RouteMatch

logger = logging.getLogger("perch.routing")


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add(Route("", StaticRenderer("Index", "<p>hi</p>")))
        router.add(Route("users/:id", JsonRenderer(UserTranslator())))
        router.compile()
        match = router.match("/users/42")
    """

    __slots__ = ("_compiled", "_pending", "_table")

    def __init__(self) -> None:
        self._pending: list[Route] = []
        self._table: tuple[Route, ...] = ()
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._pending.append(route)

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._table = tuple(self._pending)
        self._compiled = True

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes in priority order."""
        if self._compiled:
            return self._table
        return tuple(self._pending)

    def match(self, path: str | Sequence[str]) -> RouteMatch:
        """Match a request path (or pre-split segments) against the table.

        Returns a ``RouteMatch`` for the first route whose pattern matches.
        Raises ``NotFound`` if none does.
        """
        segments = split_path(path) if isinstance(path, str) else tuple(path)
        for route in self.routes:
            captures = match_path(route.segments, segments)
            if captures is not None:
                return RouteMatch(route=route, captures=captures)

        shown = path if isinstance(path, str) else "/" + "/".join(segments)
        logger.debug("No route matches %r", shown)
        raise NotFound(f"No route matches {shown!r}")
