from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from ..identity.model import Actor
from ..container import Container

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (UnauthenticatedError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
)


def register(app: Flask, container: Container) -> None:
    leave_service = container.leave_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as exc:
                for error_cls, code in _STATUS_BY_ERROR:
                    if isinstance(exc, error_cls):
                        return jsonify({"error": str(exc)}), code
                logger.exception("Unhandled domain error on %s %s", request.method, request.path)
                return jsonify({"error": str(exc)}), 500

        return wrapper

    def _actor():
        return Actor.from_headers(request.headers)

    @app.errorhandler(HTTPException)
    def http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.route("/leave", methods=["POST"], endpoint="create_leave")
    @json_errors
    def create_leave():
        payload = request.get_json(silent=True)
        record = leave_service.create(actor=_actor(), payload=payload)
        return jsonify(record.to_dict()), 201

    @app.route("/leave", methods=["GET"], endpoint="list_leaves")
    @json_errors
    def list_leaves():
        records = leave_service.list_for(actor=_actor())
        return jsonify([r.to_dict() for r in records]), 200

    @app.route("/leave/<leave_id>", methods=["GET"], endpoint="get_leave")
    @json_errors
    def get_leave(leave_id: str):
        record = leave_service.get(actor=_actor(), leave_id=leave_id)
        return jsonify(record.to_dict()), 200

    @app.route("/leave/<leave_id>", methods=["PUT"], endpoint="decide_leave")
    @json_errors
    def decide_leave(leave_id: str):
        payload = request.get_json(silent=True) or {}
        status = payload.get("status", "") if isinstance(payload, dict) else ""
        record = leave_service.decide(actor=_actor(), leave_id=leave_id, status=status)
        return jsonify(record.to_dict()), 200
