# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Request middleware."""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from src.services.visitor_service import (
    VisitorSessionCache,
    client_ip,
    derive_session_id,
    should_track,
)

logger = logging.getLogger(__name__)


class VisitorTrackingMiddleware(BaseHTTPMiddleware):
    """Tag page views with a visitor session id and log first visits.

    Tracking failures are logged and never block the request.
    """

    def __init__(self, app: ASGIApp, cache: VisitorSessionCache) -> None:
        super().__init__(app)
        self.cache = cache

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if should_track(request.url.path):
            try:
                self._track(request)
            except Exception as e:
                logger.error(f"Visitor tracking failed: {e}")
        return await call_next(request)

    def _track(self, request: Request) -> None:
        # The socket peer wins; the forwarded header is only a last resort
        if request.client and request.client.host:
            ip_address = request.client.host
        else:
            ip_address = request.headers.get("x-forwarded-for")
        user_agent = request.headers.get("user-agent", "")
        session_id = derive_session_id(ip_address, user_agent)

        if self.cache.register(session_id):
            referrer = request.headers.get("referer") or None
            logger.info(
                f"New visitor {session_id} from {client_ip(ip_address)} "
                f"landing on {request.url.path} (referrer: {referrer})"
            )
        request.state.visitor_session_id = session_id
