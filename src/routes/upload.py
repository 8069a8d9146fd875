import logging
import traceback
from flask import Blueprint, request, jsonify, current_app, g

from config import Config
from observability.metrics import inc
from schemas.upload import UploadResult
from services.storage.filename import generate_unique_filename

logger = logging.getLogger(__name__)

upload_bp = Blueprint("upload", __name__)

CONFIG_KEY = "UPLOAD_CONFIG"
FILE_FIELD = "file"
FALLBACK_NAME = "upload"


def get_upload_config() -> Config:
    return current_app.config[CONFIG_KEY]


# OPTIONS is answered with 405 like every other non-POST method
@upload_bp.route("/upload", methods=["POST"], provide_automatic_options=False)
def upload():
    rid = getattr(g, "request_id", "unknown")
    logger.info(f"[{rid}] Received POST request")
    inc("upload_requests")
    return handle_upload(get_upload_config())


def handle_upload(config: Config):
    """
    Upload endpoint placeholder.

    Derives the storage key the blob would be written under, then answers
    501 Not Implemented. Nothing is written to the container and the API key
    is not checked yet.
    """
    rid = getattr(g, "request_id", "unknown")
    try:
        f = request.files.get(FILE_FIELD)
        original_name = (f.filename if f else None) or FALLBACK_NAME
        key = generate_unique_filename(original_name)
        inc("upload_keys_generated")
        logger.info(f"[{rid}] Would store {original_name!r} as {config.container_name}/{key}")
    except Exception as e:
        inc("upload_failures")
        logger.error(f"[{rid}] Upload failed: {e}\n{traceback.format_exc()}")
        return jsonify(UploadResult(error="Upload failed").to_dict()), 500

    return jsonify(UploadResult(error="Upload not implemented yet").to_dict()), 501
