"""Verification and dispatch of inbound Interlace webhooks.

Interlace signs each delivery with a hex encoded HMAC-SHA256 of the raw
request body, keyed by the webhook secret, and sends it in the
``X-Interlace-Signature`` header.
"""

import hashlib
import hmac
from logging import getLogger
from typing import Callable, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from ._utils.constants import HEADER_WEBHOOK_SIGNATURE
from .models.errors import WebhookError
from .models.webhooks import WebhookEvent, WebhookResponse

logger = getLogger("interlace")

Payload = Union[bytes, str]
WebhookHandler = Callable[[WebhookEvent], None]


def _to_bytes(value: Payload) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def sign(payload: Payload, secret: str) -> str:
    """Compute the hex HMAC-SHA256 signature of ``payload``.

    Returns an empty string when ``secret`` is empty.
    """
    if not secret:
        return ""
    return hmac.new(
        _to_bytes(secret), _to_bytes(payload), hashlib.sha256
    ).hexdigest()


def verify(payload: Payload, secret: str, signature: str) -> bool:
    """Check ``signature`` against the payload in constant time.

    Always False when ``secret`` is empty.
    """
    if not secret or not signature:
        return False
    expected = sign(payload, secret)
    return hmac.compare_digest(_to_bytes(signature), _to_bytes(expected))


class WebhookServer:
    """Routes verified webhook events to registered handlers.

    ``handle`` is framework independent: pass it the request method, raw
    body and headers, and send back the returned status code and JSON body.

    Examples:
        ```python
        from interlace.webhooks import WebhookServer
        from interlace.models import WebhookEventType

        server = WebhookServer(secret="whsec")

        @server.on(WebhookEventType.CARD_CREATED)
        def card_created(event):
            print(event.data["cardId"])

        result = server.handle("POST", request_body, request_headers)
        ```
    """

    def __init__(self, secret: Optional[str] = None) -> None:
        self._secret = secret or ""
        self._handlers: Dict[str, WebhookHandler] = {}

    def register_handler(self, event_type: str, handler: WebhookHandler) -> None:
        self._handlers[event_type] = handler

    def on(self, event_type: str) -> Callable[[WebhookHandler], WebhookHandler]:
        def decorator(handler: WebhookHandler) -> WebhookHandler:
            self.register_handler(event_type, handler)
            return handler

        return decorator

    def parse_event(
        self, body: Payload, headers: Optional[Mapping[str, str]] = None
    ) -> WebhookEvent:
        """Verify the signature (when a secret is set) and parse the event.

        Raises:
            WebhookError: If the signature is missing or invalid, or the body
                is not a valid event.
        """
        if self._secret:
            lowered = {k.lower(): v for k, v in (headers or {}).items()}
            signature = lowered.get(HEADER_WEBHOOK_SIGNATURE.lower())
            if not signature:
                raise WebhookError("missing webhook signature")
            if not verify(body, self._secret, signature):
                raise WebhookError("invalid webhook signature")

        try:
            return WebhookEvent.model_validate_json(body)
        except ValidationError as e:
            raise WebhookError(f"failed to parse webhook event: {e}") from e

    def handle(
        self,
        method: str,
        body: Payload,
        headers: Optional[Mapping[str, str]] = None,
    ) -> WebhookResponse:
        if method.upper() != "POST":
            return WebhookResponse(status_code=405, body={"error": "Method not allowed"})

        try:
            event = self.parse_event(body, headers)
        except WebhookError as e:
            logger.warning(f"Rejected webhook: {e}")
            return WebhookResponse(
                status_code=400, body={"error": f"Failed to parse webhook: {e}"}
            )

        handler = self._handlers.get(event.event_type)
        if handler is None:
            logger.debug(f"No handler registered for {event.event_type}")
            return WebhookResponse(
                status_code=200,
                body={
                    "status": "ignored",
                    "message": "No handler registered for event type",
                },
            )

        try:
            handler(event)
        except Exception as e:
            logger.exception(f"Webhook handler for {event.event_type} failed")
            return WebhookResponse(
                status_code=500, body={"error": f"Handler error: {e}"}
            )

        return WebhookResponse(status_code=200, body={"status": "success"})
