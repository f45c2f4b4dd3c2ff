"""Path patterns and the matcher.

A pattern is ``/``-delimited; a segment starting with ``:`` is a named
capture, every other segment must match literally::

    "foo/:name/bar" vs "/foo/alice/bar" -> {"name": "alice"}
    "foo/:name/bar" vs "/foo/bar"       -> None (segment counts differ)
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import unquote_to_bytes

logger = logging.getLogger("perch.routing")

CAPTURE_PREFIX = ":"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal: ``users``  (is_capture=False)
    Capture: ``:id``    (is_capture=True, name="id")
    """

    value: str
    is_capture: bool = False

    @property
    def name(self) -> str | None:
        """Capture name without the leading colon."""
        if self.is_capture:
            return self.value[len(CAPTURE_PREFIX) :]
        return None


def split_path(path: str) -> tuple[str, ...]:
    """Split a pattern or request path into raw segments.

    One leading ``/`` is dropped; nothing else is normalized, so ``""``
    and ``"/"`` both give ``("",)`` and ``"/foo/"`` gives ``("foo", "")``.
    """
    return tuple(path.removeprefix("/").split("/"))


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern string into segments.

    Examples::

        ""              -> (PathSegment(""),)
        "foo/:name/bar" -> (PathSegment("foo"), PathSegment(":name", is_capture=True),
                            PathSegment("bar"))
    """
    return tuple(
        PathSegment(part, is_capture=part.startswith(CAPTURE_PREFIX))
        for part in split_path(pattern)
    )


def percent_decode(segment: str) -> str | None:
    """Percent-decode a raw path segment as UTF-8.

    Raw bytes the transport could not decode travel as surrogate escapes
    and are restored before unquoting. Returns ``None`` when the result
    is not valid UTF-8. Malformed escapes such as ``%zz`` are kept verbatim.
    """
    try:
        return unquote_to_bytes(segment.encode("utf-8", "surrogateescape")).decode("utf-8")
    except UnicodeError:
        return None


def match_path(
    pattern: Sequence[PathSegment],
    segments: Sequence[str],
) -> dict[str, str] | None:
    """Match raw path segments against a parsed pattern.

    Returns the captures on success, ``None`` otherwise. Later captures
    with a repeated name overwrite earlier ones.
    """
    if len(pattern) != len(segments):
        return None

    captures: dict[str, str] = {}
    for expected, actual in zip(pattern, segments, strict=True):
        if expected.is_capture:
            value = percent_decode(actual)
            if value is None:
                logger.debug("Undecodable segment %r for capture %r", actual, expected.name)
                return None
            captures[expected.name or ""] = value
        elif expected.value != actual:
            return None
    return captures
