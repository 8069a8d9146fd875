from flask import Blueprint, jsonify
from observability.metrics import snapshot

system_bp = Blueprint("system", __name__)

@system_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})

@system_bp.route("/metrics", methods=["GET"])
def metrics():
    return jsonify(snapshot())
