from __future__ import annotations

from fastapi import Request


def powered_by_middleware(value: str):
    # Overrides the server signature on every response.
    async def _middleware(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Powered-By"] = value
        return response

    return _middleware
