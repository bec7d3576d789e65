"""
tagminer HTTP front end.

Every request re-runs the pipeline over the configured data directory, so
the page always reflects the files currently on disk.
"""

import logging
from typing import Optional

from flask import Blueprint, Flask, current_app, jsonify

from ..config import Settings
from ..errors import TagMinerError
from ..pipeline import TagPipeline
from ..visualizers.text_report import render, report_payload

logger = logging.getLogger(__name__)

report_router = Blueprint("report_router", __name__)


def _run_pipeline():
    settings: Settings = current_app.config["TAGMINER_SETTINGS"]
    return TagPipeline(settings).run()


@report_router.route("/", methods=["GET"])
def report_page():
    settings: Settings = current_app.config["TAGMINER_SETTINGS"]
    try:
        report = _run_pipeline()
    except (TagMinerError, OSError) as e:
        logger.error(f"Report failed: {e}")
        return str(e), 500, {"Content-Type": "text/html"}

    body = render(report.ranked, settings.html_separator)
    return body, 200, {"Content-Type": "text/html"}


@report_router.route("/api/report", methods=["GET"])
def report_api():
    try:
        report = _run_pipeline()
    except (TagMinerError, OSError) as e:
        logger.error(f"Report failed: {e}")
        return jsonify({"error": str(e)}), 500

    return jsonify(report_payload(report))


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Application factory serving the tag report for ``settings``."""
    flask_app = Flask(__name__)
    flask_app.config["TAGMINER_SETTINGS"] = settings or Settings()
    flask_app.register_blueprint(report_router)
    return flask_app
