"""ASGI handler — translates ASGI scope/messages to perch types.

The only component that touches raw ASGI HTTP messages. Builds a
``Request``, runs the synchronous dispatch in a worker thread, and
sends the ``Response`` back through ASGI ``send()``.
"""

from collections.abc import Callable

from anyio import to_thread

from perch._internal.asgi import Receive, Scope, Send
from perch.http.request import Request
from perch.http.response import Response
from perch.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatch: Callable[[Request], Response],
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = await Request.from_asgi(scope, receive)
    # Routing, translation, and rendering are blocking; one worker per request.
    response = await to_thread.run_sync(dispatch, request)
    await send_response(response, send)
