from __future__ import annotations

from flask import Blueprint, Response


root_bp = Blueprint("root", __name__)

GREETING = "Welcome to the Pokemon battle helper server!"


@root_bp.get("/")
def index() -> Response:
    return Response(GREETING, status=200, mimetype="text/plain")


@root_bp.get("/health")
def health():
    return {"status": "ok"}
