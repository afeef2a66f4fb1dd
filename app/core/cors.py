"""
Purpose:
- CORS headers for the search API (TV and mobile clients call it cross-origin).
- Preflight OPTIONS requests are answered here instead of by a route body.
"""

from __future__ import annotations
from typing import Optional
from fastapi import Response
from .settings import settings

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"
MAX_AGE = "86400"

def _allow_origin(request_origin: Optional[str]) -> str:
    """
    Access-Control-Allow-Origin holds "*" or exactly one origin:
    echo the caller's Origin when it is allowed, else the first configured one.
    """
    origins = settings.cors_allow_origins or ["*"]
    if "*" in origins:
        return "*"
    if request_origin and request_origin in origins:
        return request_origin
    return origins[0]

def add_cors_headers(response: Response, origin: Optional[str] = None) -> Response:
    """Stamp CORS headers on an outgoing response and return it."""
    allow = _allow_origin(origin)
    response.headers["Access-Control-Allow-Origin"] = allow
    if allow != "*":
        response.headers["Vary"] = "Origin"
    response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    response.headers["Access-Control-Max-Age"] = MAX_AGE
    return response

def handle_options_request(origin: Optional[str] = None) -> Response:
    return add_cors_headers(Response(status_code=200), origin)
