"""
FriendList API: Security Headers Middleware
==============================================

What:  Adds the standard hardening headers (the helmet defaults) to every
       response, including error responses.
How:   Headers already set by a route are left alone, so an endpoint can
       override any of them.
"""

from typing import Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

DEFAULT_SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Sets DEFAULT_SECURITY_HEADERS, merged with any overrides."""

    def __init__(self, app, overrides: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.headers = {**DEFAULT_SECURITY_HEADERS, **(overrides or {})}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
