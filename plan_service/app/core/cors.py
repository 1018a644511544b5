"""
Artifact: plan_service/app/core/cors.py
Purpose: Answers cross-origin preflight requests with an empty, permissive success response.
Created: 2026-10-19
Preconditions:
- Registered as an HTTP middleware outside CORSMiddleware.
Inputs:
- Acceptable: Any HTTP request; only OPTIONS requests are intercepted.
- Unacceptable: Not applicable.
Postconditions:
- OPTIONS requests never reach routing and receive a 200 with an empty body.
Returns:
- `Response` for OPTIONS, otherwise the downstream response unchanged.
Errors/Exceptions:
- None raised here; downstream exceptions propagate.
"""

from fastapi import Request
from fastapi.responses import Response

ALLOWED_HEADERS = "authorization, x-client-info, apikey, content-type"
ALLOWED_METHODS = "GET, POST, OPTIONS"


def preflight_headers(requested_headers: str = "") -> dict:
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": requested_headers.strip() or ALLOWED_HEADERS,
        "Access-Control-Max-Age": "600",
    }


async def answer_preflight(request: Request, call_next):
    if request.method == "OPTIONS":
        requested = request.headers.get("access-control-request-headers", "")
        return Response(status_code=200, headers=preflight_headers(requested))
    return await call_next(request)
