"""Webhook receiver.

Accepts any method on /hook/{endpoint_id} and records the request as an
event. Senders get 404 for unknown endpoints and 410 once an endpoint expired.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, Request

from ...features.webhooks.repositories import WebhookStore
from ...features.webhooks.utils import parse_json_body
from ..dependencies import get_webhook_store
from ..models import CaptureResponse

logger = logging.getLogger(__name__)

CAPTURED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter()


def _header_multi_map(request: Request) -> Dict[str, List[str]]:
    headers: Dict[str, List[str]] = {}
    for name, value in request.headers.items():
        headers.setdefault(name, []).append(value)
    return headers


def _query_multi_map(request: Request) -> Dict[str, List[str]]:
    params: Dict[str, List[str]] = {}
    for key, value in request.query_params.multi_items():
        params.setdefault(key, []).append(value)
    return params


@router.api_route(
    "/hook/{endpoint_id}",
    methods=CAPTURED_METHODS,
    response_model=CaptureResponse,
    name="receive_webhook",
)
async def receive_webhook(
    endpoint_id: str,
    request: Request,
    store: WebhookStore = Depends(get_webhook_store),
) -> CaptureResponse:
    """Capture headers, query parameters and body from any HTTP method."""
    body = parse_json_body(await request.body())

    event = store.save_event(
        endpoint_id,
        method=request.method,
        headers=_header_multi_map(request),
        query_params=_query_multi_map(request),
        body=body,
    )
    logger.info(f"Captured {event.method} event {event.id} for endpoint {endpoint_id}")

    return CaptureResponse()
