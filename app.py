from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request, send_from_directory

from spotit import (
    ConfigurationError,
    Deck,
    build,
    plane_size,
    render_deck,
    status_text,
    verify,
)
from spotit_core.logging_utils import get_logger, setup_logging

DEFAULT_ORDER = int(os.getenv("SPOTIT_ORDER", "7"))
# Pairwise checks grow roughly as order**5; keep requests small.
MAX_ORDER = int(os.getenv("SPOTIT_MAX_ORDER", "31"))

STATIC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "static"))
app = Flask(__name__, static_url_path="/static", static_folder=STATIC_DIR)
logger = get_logger(__name__)


def deck_to_json(deck: Deck) -> Dict[str, Any]:
    return {
        "order": int(deck.order),
        "cards": [[int(p) for p in card] for card in deck.cards],
        "glyphs": render_deck(deck.cards),
    }


def cards_from_json(obj: Any) -> List[Tuple[int, ...]]:
    """Parses a posted list of cards; raises ValueError on anything but lists of ints."""
    if not isinstance(obj, list):
        raise ValueError("cards must be a list")
    if len(obj) > plane_size(MAX_ORDER):
        raise ValueError(f"too many cards: {len(obj)} exceeds {plane_size(MAX_ORDER)}")
    cards: List[Tuple[int, ...]] = []
    for i, card in enumerate(obj):
        if not isinstance(card, list):
            raise ValueError(f"card {i} must be a list")
        if len(card) > MAX_ORDER + 1:
            raise ValueError(f"card {i} has too many symbols: {len(card)}")
        row: List[int] = []
        for p in card:
            if isinstance(p, bool) or not isinstance(p, int):
                raise ValueError(f"card {i} holds a non-integer symbol: {p!r}")
            row.append(p)
        cards.append(tuple(row))
    return cards


def verification_to_json(passed: bool, diagnostics: Tuple[str, ...]) -> Dict[str, Any]:
    return {
        "passed": bool(passed),
        "status": status_text(passed),
        "diagnostics": list(diagnostics),
    }


def _order_from_body(body: Dict[str, Any]) -> Optional[int]:
    raw = body.get("order", None)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"bad order: {raw!r}")
    if raw > MAX_ORDER:
        raise ValueError(f"order {raw} exceeds the limit of {MAX_ORDER}")
    return raw


# ---------- Static routes ----------

@app.get("/")
def index() -> Any:
    return send_from_directory(app.static_folder, "index.html")


@app.get("/main.js")
def main_js() -> Any:
    resp = send_from_directory(app.static_folder, "main.js")
    resp.headers["Content-Type"] = "application/javascript; charset=utf-8"
    return resp


@app.get("/styles.css")
def styles_css() -> Any:
    resp = send_from_directory(app.static_folder, "styles.css")
    resp.headers["Content-Type"] = "text/css; charset=utf-8"
    return resp


# ---------- Deck API (required by main.js) ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    try:
        order = _order_from_body(body)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    try:
        deck = build(DEFAULT_ORDER if order is None else order)
    except ConfigurationError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    passed, diagnostics = verify(deck)
    if not passed:
        logger.warning("new deck of order %d failed verification (%d findings)", deck.order, len(diagnostics))
    out = deck_to_json(deck)
    out.update({"ok": True, "verification": verification_to_json(passed, diagnostics)})
    return jsonify(out)


@app.post("/api/verify")
def api_verify() -> Any:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict) or "cards" not in body:
        return jsonify({"ok": False, "error": "cards required"}), 400
    try:
        cards = cards_from_json(body["cards"])
        order = _order_from_body(body)
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad deck: {e}"}), 400
    passed, diagnostics = verify(cards, order)
    for d in diagnostics:
        logger.info("verify: %s", d)
    out = verification_to_json(passed, diagnostics)
    out["ok"] = True
    return jsonify(out)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
