"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field

from perch.rendering.protocol import Renderer
from perch.routing.pattern import PathSegment, parse_pattern


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: a pattern bound to a renderer.

    Created during app setup, compiled into the router at freeze time.
    """

    path: str
    renderer: Renderer
    segments: tuple[PathSegment, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", parse_pattern(self.path))

    @property
    def capture_names(self) -> tuple[str, ...]:
        """Names of the captures in this route's pattern, in order."""
        return tuple(seg.name for seg in self.segments if seg.name is not None)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    captures: dict[str, str]
