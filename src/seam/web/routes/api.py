from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from seam.parser import ParseError
from seam.workspace import Workspace, WorkspaceError

api_bp = Blueprint("api", __name__)

logger = logging.getLogger(__name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow the browser extension to call the API from any origin."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _workspace() -> Workspace:
    return current_app.extensions["workspace"]


def _error(message: str, status: int, **extra):
    return jsonify({"success": False, "error": message, **extra}), status


def _json_body() -> dict | None:
    """The request body when it is a JSON object; {} when there is no body."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _ordinal(data: dict) -> int | None:
    """elementIndex from the request body; None when omitted."""
    value = data.get("elementIndex")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("elementIndex must be an integer")
    return value


def _file(data: dict) -> str | None:
    value = data.get("file")
    if value is not None and not isinstance(value, str):
        raise ValueError("file must be a string")
    return value


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok"})


@api_bp.route("/get-classname-expression", methods=["POST"])
def get_classname_expression():
    """Report the current className of one element."""
    data = _json_body()
    if data is None:
        return _error("Request body must be a JSON object", 400)
    tag_name = data.get("tagName")
    if not isinstance(tag_name, str) or not tag_name:
        return _error("tagName required", 400)
    try:
        ordinal = _ordinal(data)
        file = _file(data)
    except ValueError as e:
        return _error(str(e), 400)

    try:
        value = _workspace().read_class(tag_name, ordinal, file)
    except ParseError as e:
        logger.error("get-classname-expression: %s", e)
        return _error(str(e), 500, line=e.line, column=e.column)
    except WorkspaceError as e:
        logger.error("get-classname-expression: %s", e)
        return _error(str(e), 500)

    return jsonify({
        "success": True,
        "classNameExpression": value or "",
        "tagName": tag_name,
        "elementIndex": ordinal,
    })


@api_bp.route("/update-classes", methods=["POST"])
def update_classes():
    """Write a new className for one element back to the source file."""
    data = _json_body()
    if data is None:
        return _error("Request body must be a JSON object", 400)
    tag_name = data.get("tagName")
    new_class_name = data.get("newClassName")
    if not isinstance(tag_name, str) or not tag_name or not isinstance(new_class_name, str):
        return _error("tagName and newClassName required", 400)
    try:
        ordinal = _ordinal(data)
        file = _file(data)
    except ValueError as e:
        return _error(str(e), 400)

    try:
        result = _workspace().update_class(
            tag_name, new_class_name, ordinal, file
        )
    except ParseError as e:
        logger.error("update-classes: %s", e)
        return _error(str(e), 500, line=e.line, column=e.column)
    except WorkspaceError as e:
        logger.error("update-classes: %s", e)
        return _error(str(e), 500)

    return jsonify({
        "success": True,
        "message": "Classes updated in source file" if result.changed else "No changes made",
        "file": result.file,
        "changed": result.changed,
    })
