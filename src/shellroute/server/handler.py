"""ASGI handler — translates ASGI scope/messages to shellroute types.

The only component besides the sender that touches raw ASGI. Converts the
scope to a Request, dispatches it, and sends the Response back.
"""

from shellroute._internal.asgi import Receive, Scope, Send
from shellroute.http.request import Request
from shellroute.server.dispatch import Dispatcher
from shellroute.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
) -> None:
    """Process a single HTTP request.

    Exceptions from the hook or the handler are not caught here; the ASGI
    server turns them into its own error response.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    response = await dispatcher.dispatch(request)
    await send_response(response, send)
