"""Static API documentation."""

from pathlib import Path

from flask import Blueprint, send_from_directory

DOCS_DIR = Path(__file__).resolve().parent.parent / "docs"

docs_bp = Blueprint("docs", __name__)


@docs_bp.route("/html", methods=["GET"])
def html():
    return send_from_directory(DOCS_DIR, "docs.html", mimetype="text/html")
