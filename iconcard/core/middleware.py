import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from .config import Config


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_SECONDS = 1.0


def request_id_for(request: Request) -> str:
    """Return the id assigned by ``log_requests``, creating one if it never ran."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
        request.state.request_id = request_id
    return request_id


async def log_requests(request: Request, call_next: Callable):
    """Tag the request with an id shared by every log line it produces.

    Only slow or failed requests are logged; the id is echoed back in the
    X-Request-ID response header.
    """
    start_time = time.perf_counter()
    request_id = request_id_for(request)

    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"[{request_id}] {request.method} {request.url.path} - ERROR: {str(e)} - {time.perf_counter() - start_time:.2f}s")
        raise

    process_time = time.perf_counter() - start_time
    if process_time > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info(f"[{request_id}] {request.method} {request.url.path} - {response.status_code} - {process_time:.2f}s")
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def global_exception_handler(request: Request, exc: Exception):
    request_id = request_id_for(request)
    logger.error(f"[{request_id}] Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)

    response = JSONResponse(status_code=500, content={"detail": "Internal server error", "request_id": request_id})
    response.headers[REQUEST_ID_HEADER] = request_id

    # Runs outside CORSMiddleware, so browsers need the headers set here
    origin = request.headers.get("origin")
    if origin and origin in Config.allowed_origins():
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
    return response
