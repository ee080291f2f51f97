from flask import Blueprint, current_app, jsonify
from datetime import datetime, timezone

status_bp = Blueprint("status_api", __name__, url_prefix="/api")


@status_bp.get("/status")
def status():
    """Basic status check with the active scripture provider."""
    service = current_app.extensions["bible_service"]
    return jsonify(
        {
            "status": "ok",
            "time_utc": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "provider": service.provider.describe(),
            "translations": service.get_available_translations(),
        }
    )
