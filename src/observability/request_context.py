import logging
import uuid
import time
from flask import g, request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def start_request():
    g.request_id = uuid.uuid4().hex[:12]
    g.start_time = time.time()


def end_request(response):
    # before_request may not have run if an earlier hook failed
    start_time = getattr(g, "start_time", None)
    duration_ms = int((time.time() - start_time) * 1000) if start_time else 0
    request_id = getattr(g, "request_id", "unknown")

    log = {
        "request_id": request_id,
        "method": request.method,
        "path": request.path,
        "status": response.status_code,
        "duration_ms": duration_ms,
        "content_length": request.content_length
    }

    logger.info(f"[REQUEST] {log}")
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
