from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify
from spellrank.engine import Engine, Session
from spellrank.config import TOP_K

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: Engine | None = None
_session: Session | None = None

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    if not q:
        return jsonify([])
    return jsonify(_session.get_suggestions(q, k))  # type: ignore


@app.get("/api/parameters")
def api_parameters():
    return jsonify(_engine.weights.as_list())  # type: ignore


def _update_values():
    # accepts {"parameters": [a, b, iw, sw, ow]} or a bare list
    body = request.get_json(silent=True)
    return body.get("parameters") if isinstance(body, dict) else body


@app.post("/api/parameters")
def api_configure():
    result = _engine.apply_parameters(_update_values())  # type: ignore
    return jsonify({"result": str(result)})


@app.post("/api/parameters/messages")
def api_submit():
    # acknowledged on the channel's queue and listeners, not in the response
    channel = _engine.parameters  # type: ignore
    channel.submit(_update_values())
    if not channel.running:
        channel.drain()
    return jsonify({"queued": True}), 202


@app.get("/health")
def health():
    return jsonify({"ok": _session is not None, "locale": _session.locale if _session else None})


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the suggestion API on top of Engine")
    ap.add_argument("--locale", default="en")
    ap.add_argument("--resources", default=None, help="Directory holding <locale>.words/.freq")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine, _session
    _engine = Engine(resource_root=args.resources, verbose=args.verbose)
    _session = _engine.create_session(args.locale)
    _engine.parameters.subscribe(lambda ack: log.info("Parameter update acknowledged: %s", ack))
    _engine.parameters.start()

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
