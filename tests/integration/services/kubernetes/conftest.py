"""Local HTTP API server fixtures for Kubernetes integration tests.

The server answers a fixed set of GET paths with canned JSON and records
the Authorization header of every request, so a real ``ApiClient`` built
from raw credentials can be driven end to end without a cluster.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlsplit

import pytest


def _api_resource(kind: str, plural: str, namespaced: bool, verbs: list[str]) -> dict[str, Any]:
    return {
        "name": plural,
        "singularName": kind.lower(),
        "namespaced": namespaced,
        "kind": kind,
        "verbs": verbs,
    }


def _object_list(kind: str, api_version: str, items: list[dict[str, Any]]) -> dict[str, Any]:
    return {"apiVersion": api_version, "kind": kind, "metadata": {}, "items": items}


def _metadata(name: str, namespace: str | None = None) -> dict[str, Any]:
    metadata: dict[str, Any] = {"name": name}
    if namespace:
        metadata["namespace"] = namespace
    return {"metadata": metadata}


def _status(code: int, reason: str) -> dict[str, Any]:
    return {
        "apiVersion": "v1",
        "kind": "Status",
        "metadata": {},
        "status": "Failure",
        "reason": reason,
        "code": code,
    }


def _group(name: str, version: str) -> dict[str, Any]:
    group_version = {"groupVersion": f"{name}/{version}", "version": version}
    return {"name": name, "versions": [group_version], "preferredVersion": group_version}


# path -> (status, body)
ROUTES: dict[str, tuple[int, dict[str, Any]]] = {
    "/api/v1": (
        200,
        {
            "kind": "APIResourceList",
            "groupVersion": "v1",
            "resources": [
                _api_resource("Pod", "pods", True, ["get", "list", "watch"]),
                _api_resource("Binding", "bindings", True, ["create"]),
                _api_resource("Node", "nodes", False, ["get", "list"]),
            ],
        },
    ),
    "/api/v1/namespaces": (
        200,
        _object_list(
            "NamespaceList", "v1", [_metadata("default"), _metadata("kube-system")]
        ),
    ),
    "/api/v1/namespaces/default/pods": (
        200,
        _object_list("PodList", "v1", [_metadata("nginx", "default")]),
    ),
    "/api/v1/namespaces/kube-system/pods": (403, _status(403, "Forbidden")),
    "/api/v1/nodes": (200, _object_list("NodeList", "v1", [_metadata("node-1")])),
    "/apis": (
        200,
        {
            "kind": "APIGroupList",
            "apiVersion": "v1",
            "groups": [_group("apps", "v1"), _group("broken.example.com", "v1")],
        },
    ),
    "/apis/apps/v1": (
        200,
        {
            "kind": "APIResourceList",
            "apiVersion": "v1",
            "groupVersion": "apps/v1",
            "resources": [_api_resource("Deployment", "deployments", True, ["get", "list"])],
        },
    ),
    "/apis/apps/v1/namespaces/default/deployments": (
        200,
        _object_list("DeploymentList", "apps/v1", [_metadata("web", "default")]),
    ),
    "/apis/apps/v1/namespaces/kube-system/deployments": (
        200,
        _object_list("DeploymentList", "apps/v1", []),
    ),
}


@dataclass
class FakeApiServer:
    """Handle on the running server."""

    url: str
    requests: list[tuple[str, str | None]] = field(default_factory=list)


def _handler_for(server: FakeApiServer) -> type[BaseHTTPRequestHandler]:
    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            path = urlsplit(self.path).path
            server.requests.append((path, self.headers.get("Authorization")))
            status, body = ROUTES.get(path, (404, _status(404, "NotFound")))
            payload = json.dumps(body).encode()
            self.send_response(status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, format: str, *args: Any) -> None:
            pass

    return Handler


@pytest.fixture
def fake_api_server() -> Iterator[FakeApiServer]:
    """Serve the canned API on an ephemeral localhost port."""
    state = FakeApiServer(url="")
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _handler_for(state))
    state.url = f"http://127.0.0.1:{httpd.server_address[1]}"
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield state
    finally:
        httpd.shutdown()
        httpd.server_close()
        thread.join(timeout=5)
