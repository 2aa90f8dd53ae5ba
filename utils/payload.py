"""Response envelope helpers."""

from __future__ import annotations

from http import HTTPStatus

from flask import jsonify


def envelope(code: int, data=None, *, success: bool = True) -> dict:
    return {
        "code": code,
        "status": HTTPStatus(code).phrase,
        "success": success,
        "data": data,
    }


def ok(data=None, code: int = HTTPStatus.OK) -> tuple:
    """Return a successful enveloped JSON response."""

    return jsonify(envelope(int(code), data)), int(code)
