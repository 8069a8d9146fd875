import threading

_LOCK = threading.Lock()

METRICS = {
    "upload_requests": 0,
    "upload_keys_generated": 0,
    "upload_failures": 0,
    "method_not_allowed": 0,
}


def inc(key, value=1):
    with _LOCK:
        METRICS[key] = METRICS.get(key, 0) + value


def snapshot():
    with _LOCK:
        return dict(METRICS)


def reset():
    with _LOCK:
        for key in METRICS:
            METRICS[key] = 0
