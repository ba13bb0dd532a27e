# Middleware package init
"""
FriendList API: Middleware Package
=====================================

Middleware Chain (first to run on the request):
    Request → [Request ID] → [Logging] → [Security Headers] → [CORS] → Route

    1. Request ID: correlation ID available to every later log line
    2. Logging: one access line per request, with status and duration
    3. Security Headers: hardening headers on every response
    4. CORS: Starlette's CORSMiddleware (handles preflight)
"""
