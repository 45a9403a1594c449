"""HTTP endpoints for liveness, readiness and Prometheus scraping."""

from __future__ import annotations

import threading
from typing import Any

from prometheus_client import make_wsgi_app
from werkzeug.serving import make_server
from werkzeug.wrappers import Response

PROBES = {
    "/healthz": '{"status":"ok"}',
    "/readyz": '{"status":"ready"}',
}


def create_combined_wsgi_app() -> Any:
    """WSGI app answering the health check paths and serving metrics on every other path."""
    metrics_app = make_wsgi_app()

    def app(environ: dict[str, Any], start_response: Any) -> Any:
        body = PROBES.get(environ.get("PATH_INFO", ""))
        if body is None:
            return metrics_app(environ, start_response)
        return Response(body, mimetype="application/json", status=200)(environ, start_response)

    return app


def start_health_server(port: int) -> threading.Thread:
    """Serve the combined app on ``port`` from a daemon thread."""
    server = make_server("", port, create_combined_wsgi_app(), threaded=True)
    thread = threading.Thread(target=server.serve_forever, name="health-server", daemon=True)
    thread.start()
    return thread
