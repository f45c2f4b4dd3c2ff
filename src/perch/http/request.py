"""Immutable HTTP request.

Everything the routing core needs is read up front: the path segments,
the headers, and the merged query/form parameters. The core never
suspends on I/O, so the body is consumed before dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from perch._internal.asgi import Receive, Scope
from perch.http.headers import Headers
from perch.http.params import RequestParams
from perch.routing.pattern import split_path


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``segments`` are the ``/``-separated pieces of the raw (still
    percent-encoded) path; the matcher decodes captured segments. Raw
    path bytes are read as UTF-8, invalid bytes kept as surrogate escapes.
    """

    method: str
    path: str
    segments: tuple[str, ...]
    headers: Headers = field(default_factory=Headers)
    params: RequestParams = field(default_factory=RequestParams)

    @property
    def depth(self) -> int:
        """Number of path segments, handed to renderers as the route depth."""
        return len(self.segments)

    @classmethod
    def build(
        cls,
        path: str,
        *,
        method: str = "GET",
        params: RequestParams | None = None,
        headers: Headers | None = None,
    ) -> Request:
        """Create a request directly from a raw path (used outside ASGI)."""
        return cls(
            method=method,
            path=path,
            segments=split_path(path),
            headers=headers or Headers(),
            params=params or RequestParams(),
        )

    @classmethod
    async def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Create a Request from an ASGI scope, reading the whole body."""
        headers = Headers(tuple(scope.get("headers", ())))
        raw_path = scope.get("raw_path")
        if raw_path:
            path = raw_path.decode("utf-8", "surrogateescape").split("?", 1)[0]
        else:
            # scope["path"] arrives percent-decoded; escape "%" so captures decode once
            path = scope["path"].replace("%", "%25")

        chunks: list[bytes] = []
        while True:
            message = await receive()
            body = message.get("body", b"")
            if body:
                chunks.append(body)
            if not message.get("more_body", False):
                break

        params = RequestParams.from_sources(
            scope.get("query_string", b""),
            b"".join(chunks),
            headers.get("content-type"),
        )
        return cls(
            method=scope["method"],
            path=path,
            segments=split_path(path),
            headers=headers,
            params=params,
        )
