# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, abort, jsonify, send_from_directory
from sqlalchemy.engine import Engine
from werkzeug.security import safe_join

from carshop.infrastructure.health import check_database
from carshop.infrastructure.observability import render_metrics


class MiscController:
    def __init__(self, *, engine: Engine, public_dir: Path, metrics_enabled: bool = True) -> None:
        self._engine = engine
        self._public_dir = Path(public_dir)
        self._metrics_enabled = metrics_enabled

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/api/metrics", view_func=self.metrics, methods=["GET"])
        bp.add_url_rule("/", view_func=self.index, methods=["GET"], defaults={"path": ""})
        bp.add_url_rule("/<path:path>", view_func=self.index, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except Exception as exc:  # pragma: no cover
            status["ok"] = False
            status["database"] = f"error: {exc}"
        return jsonify(status)

    def metrics(self):
        if not self._metrics_enabled:
            abort(404)
        payload, content_type = render_metrics()
        return Response(payload, content_type=content_type)

    def index(self, path: str):
        # Serve real files from the public dir; every other path gets the SPA shell.
        candidate = safe_join(str(self._public_dir), path) if path else None
        if candidate is not None and Path(candidate).is_file():
            return send_from_directory(self._public_dir, path)
        return send_from_directory(self._public_dir, "index.html")
