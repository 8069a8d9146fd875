import os
import uuid
import datetime

DATE_FORMAT = "%Y%m%d"


def _new_id() -> str:
    return str(uuid.uuid4())


def file_extension(original_name: str) -> str:
    """
    Everything from the last "." of the base name, dot included, or "".
    Unlike os.path.splitext, dotfiles keep their whole name (".env" -> ".env").
    """
    base = os.path.basename(original_name)
    idx = base.rfind(".")
    if idx == -1:
        return ""
    return base[idx:]


def generate_unique_filename(original_name: str, now=None, id_factory=None) -> str:
    """
    Build a storage key of the form "{yyyymmdd}/{uuid}{ext}".

    now and id_factory are zero-argument callables so callers (and tests) can
    pin the clock and the identifier. No check is made against existing keys.
    """
    now = now or datetime.datetime.now
    id_factory = id_factory or _new_id

    ext = file_extension(original_name)
    timestamp = now().strftime(DATE_FORMAT)
    return f"{timestamp}/{id_factory()}{ext}"
