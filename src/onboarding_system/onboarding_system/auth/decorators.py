from __future__ import annotations

from functools import wraps

from flask import flash, g, jsonify, redirect, request, session, url_for

from ..core.exceptions import InvalidTokenError, TokenExpiredError
from .service import AuthService

SESSION_TOKEN_KEY = "token"


def bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, value = header.partition(" ")
    if scheme.lower() != "bearer" or not value.strip():
        return None
    return value.strip()


def make_admin_required(auth_service: AuthService):
    """Build a view decorator that redirects to the login page without an active admin session."""

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.admin_session = auth_service.require_session(session.get(SESSION_TOKEN_KEY))
            except TokenExpiredError as e:
                session.pop(SESSION_TOKEN_KEY, None)
                flash(str(e), "warning")
                return redirect(url_for("login", next=request.path))
            except InvalidTokenError:
                session.pop(SESSION_TOKEN_KEY, None)
                flash("Please log in to continue!", "warning")
                return redirect(url_for("login", next=request.path))
            return view(*args, **kwargs)

        return wrapper

    return admin_required


def make_token_required(auth_service: AuthService):
    """Same check for the JSON API, reading an `Authorization: Bearer` header."""

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.admin_session = auth_service.require_session(bearer_token())
            except InvalidTokenError as e:
                return jsonify({"error": str(e)}), 401
            return view(*args, **kwargs)

        return wrapper

    return token_required
