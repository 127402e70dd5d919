import time
import uuid

from fastapi import Request

from commit_feed.logging_utils import log_event


async def request_id_middleware(request: Request, call_next):
    # Reuse the caller's id when the hosting page already assigned one
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    request.state.request_id = request_id

    t0 = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)

    response.headers["X-Request-ID"] = request_id
    log_event(
        "request_finished",
        request_id=request_id,
        path=request.url.path,
        status=response.status_code,
        elapsed_ms=elapsed_ms,
    )

    return response
