# interface/api.py
import json
import re
from pathlib import Path

from flask import Blueprint, current_app, jsonify

api_bp = Blueprint("api", __name__, url_prefix="/api")

# to samo, co reguły w _redirects: /api/<code> -> /api/<code>.json
_NAME_RE = re.compile(r"^(all|[a-z]{2})(\.json)?$")


def _api_dir() -> Path:
    return Path(current_app.config["DIST_DIR"]) / "api"


@api_bp.route("", defaults={"name": "all"})
@api_bp.route("/<name>")
def get_document(name: str):
    """
    Podgląd wygenerowanych plików (lokalnie, zamiast hostingu statycznego).

      /api, /api/all, /api/all.json  -> lista wszystkich krajów
      /api/de, /api/de.json    -> jeden kraj
    """
    match = _NAME_RE.match(name.lower())
    if not match:
        return jsonify({"error": f"Invalid country code '{name}'"}), 400

    path = _api_dir() / f"{match.group(1)}.json"
    if not path.exists():
        return jsonify({"error": f"No data for '{match.group(1)}', run tools/build_vat_api.py first"}), 404

    with path.open("r", encoding="utf-8") as f:
        return jsonify(json.load(f))
