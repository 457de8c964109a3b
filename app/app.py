from __future__ import annotations

import os
from pathlib import Path
import sys
import threading
import uuid
from typing import Optional

from flask import Flask, jsonify, request

ROOT = Path(__file__).resolve().parent.parent
# Asegurar que la raíz del repo esté en sys.path al ejecutar `python app/app.py`
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cardguess.deck import sample_cards
from cardguess.report import summary_rows
from cardguess.session import GuessParams, GuessSession, parse_flag

MAX_SESSIONS = 1000


def create_app(log_path: Optional[str] = None, max_sessions: int = MAX_SESSIONS) -> Flask:
    app = Flask(__name__)

    LOG = Path(log_path) if log_path else ROOT / "outputs_ui" / "run_log.txt"
    sessions: dict[str, GuessSession] = {}
    lock = threading.Lock()

    def _append_log(path: Path, line: str):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line.rstrip() + "\n")

    def _parse_int(val, default):
        if val is None or val == "":
            return default
        return int(val)

    def _store(sid: str, s: GuessSession):
        # Lleno: se descartan primero las sesiones terminadas, luego las más viejas
        while sessions and len(sessions) >= max_sessions:
            old = next((k for k, v in sessions.items() if v.finished), None) or next(iter(sessions))
            del sessions[old]
            _append_log(LOG, f"session {old} evicted")
        sessions[sid] = s

    def _get(sid: str) -> GuessSession:
        if sid not in sessions:
            raise KeyError(sid)
        return sessions[sid]

    def _state(sid: str, s: GuessSession) -> dict:
        d = s.to_dict()
        d["ok"] = True
        d["id"] = sid
        return d

    @app.get("/api/summary")
    def api_summary():
        s = GuessSession.from_cards(sample_cards(), GuessParams(randomize=False))
        return jsonify({"ok": True, "metrics": [[k, v] for k, v in summary_rows(s.code, s.frequencies)]})

    @app.post("/api/session")
    def api_new_session():
        data = request.get_json(silent=True) or {}
        try:
            params = GuessParams(
                seed=_parse_int(data.get("seed"), None),
                mask_bits=_parse_int(data.get("mask_bits"), 53),
                randomize=parse_flag(data.get("randomize"), True),
            )
            s = GuessSession.from_cards(sample_cards(), params)
        except (ValueError, TypeError) as e:
            return jsonify({"ok": False, "error": str(e)}), 400
        sid = uuid.uuid4().hex[:8]
        with lock:
            _store(sid, s)
        _append_log(LOG, f"session {sid} start: {params}")
        return jsonify(_state(sid, s)), 201

    @app.get("/api/session/<sid>")
    def api_get_session(sid: str):
        try:
            with lock:
                return jsonify(_state(sid, _get(sid)))
        except KeyError:
            return jsonify({"ok": False, "error": "Sesión no encontrada"}), 404

    @app.post("/api/session/<sid>/answer")
    def api_answer(sid: str):
        data = request.get_json(silent=True) or {}
        try:
            with lock:
                s = _get(sid)
        except KeyError:
            return jsonify({"ok": False, "error": "Sesión no encontrada"}), 404
        try:
            if "answer" not in data:
                raise ValueError("answer requerido")
            with lock:
                guess = s.answer(data["answer"])
                state = _state(sid, s)
        except (ValueError, RuntimeError) as e:
            _append_log(LOG, f"session {sid} [WARN] {e}")
            return jsonify({"ok": False, "error": str(e)}), 400
        _append_log(LOG, f"session {sid} answer #{state['question_index']}: {state['answers'][-1]}")
        if guess is not None:
            _append_log(LOG, f"session {sid} guess: {guess} ({len(state['answers'])} preguntas)")
        return jsonify(state)

    @app.post("/api/session/<sid>/reset")
    def api_reset(sid: str):
        try:
            with lock:
                s = _get(sid)
        except KeyError:
            return jsonify({"ok": False, "error": "Sesión no encontrada"}), 404
        with lock:
            s.reset()
            state = _state(sid, s)
        _append_log(LOG, f"session {sid} reset")
        return jsonify(state)

    @app.delete("/api/session/<sid>")
    def api_delete(sid: str):
        with lock:
            removed = sessions.pop(sid, None)
        if removed is None:
            return jsonify({"ok": False, "error": "Sesión no encontrada"}), 404
        return jsonify({"ok": True})

    return app


app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=True)
