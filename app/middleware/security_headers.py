"""Security headers middleware.

Adds security-related response headers. The CSP permits the inline styles of
the server-rendered pages and the CDN assets of the interactive API docs.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming.
"""

from typing import Callable

_CDN = "https://cdn.jsdelivr.net"

DEFAULT_HEADERS = {
    "Content-Security-Policy": (
        f"default-src 'self'; style-src 'self' 'unsafe-inline' {_CDN}; "
        f"script-src 'self' 'unsafe-inline' {_CDN}; img-src 'self' data: https:; "
        "frame-ancestors 'none'"
    ),
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on all responses unless the app already set them. Raw ASGI."""
    resolved = headers if headers is not None else DEFAULT_HEADERS.copy()
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {h[0].lower() for h in headers}
                headers.extend(h for h in header_list if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
