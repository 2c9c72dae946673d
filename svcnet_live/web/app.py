from __future__ import annotations
from flask import Flask, request

from ..collectors import make_introspector
from ..config import CFG
from ..errors import FatalPipelineError
from ..store import LabelStore
from ..topology import collect
from .jsonio import json_response
from .labels import labels_bp

def label_filter(services, wanted):
    """Keep services whose label contains any wanted substring (case-insensitive)."""
    needles = [w.lower() for w in wanted if w]
    if not needles:
        return services
    return [s for s in services if any(n in s.label.lower() for n in needles)]

def create_app(cfg: CFG, store: LabelStore, introspector=None) -> Flask:
    app = Flask(__name__)
    app.extensions["label_store"] = store
    app.register_blueprint(labels_bp)
    if introspector is None:
        introspector = make_introspector(cfg)

    @app.get("/api/services")
    def api_services():
        try:
            services = collect(introspector, cfg)
        except FatalPipelineError as e:
            app.logger.error("Error fetching services: %s", e)
            return json_response({"error": "Failed to fetch services"}, 500)
        services = label_filter(services, request.args.getlist("label"))
        return json_response({"services": [s.to_dict() for s in services]})

    @app.get("/api/health")
    def api_health():
        return json_response({"ok": True, "backend": cfg.backend, "dev_ports": sorted(cfg.dev_ports)})

    return app
