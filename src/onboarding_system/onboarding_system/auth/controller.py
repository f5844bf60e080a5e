from __future__ import annotations

import logging
from urllib.parse import urlsplit

from flask import Flask, flash, g, jsonify, redirect, render_template, request, session, url_for

from ..core.exceptions import AuthenticationError, DomainError
from ..container import Container
from .decorators import SESSION_TOKEN_KEY, bearer_token, make_token_required

logger = logging.getLogger(__name__)


def _safe_next(target: str | None) -> str | None:
    # Only same-site relative paths
    if not target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not target.startswith("/") or target.startswith(("//", "/\\")):
        return None
    return target


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                s = container.auth_service.login(username, password)
                session[SESSION_TOKEN_KEY] = s.token
                flash("Logged in successfully!", "success")
                return redirect(_safe_next(request.args.get("next")) or url_for("list_employees"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except DomainError as e:
                logger.exception("Login failed")
                flash(f"System error during login: {e}", "danger")

        return render_template("login.html", title="Admin Login")

    @app.route("/logout", endpoint="logout")
    def logout():
        token = session.pop(SESSION_TOKEN_KEY, None)
        if token:
            container.auth_service.logout(token)
        flash("Logged out.", "info")
        return redirect(url_for("index"))

    @app.route("/api/v1/auth/login", methods=["POST"], endpoint="api_login")
    def api_login():
        body = request.get_json(silent=True) or {}
        try:
            s = container.auth_service.login(str(body.get("id", "")), str(body.get("password", "")))
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        return jsonify({"message": "Logged in successfully", "token": s.token})

    @app.route("/api/v1/auth/logout", methods=["POST"], endpoint="api_logout")
    @token_required
    def api_logout():
        container.auth_service.logout(bearer_token())
        return jsonify({"message": "Logged out"})

    @app.route("/api/v1/auth/session", methods=["GET"], endpoint="api_session")
    @token_required
    def api_session():
        s = g.admin_session
        return jsonify({"message": "Session active", "identifier": s.identifier, "issued_at": s.issued_at})

    @app.route("/api/v1/auth/verify", methods=["POST"], endpoint="api_verify_employee")
    def api_verify_employee():
        body = request.get_json(silent=True) or {}
        try:
            employee = container.auth_service.verify_employee(str(body.get("handle", "")), str(body.get("password", "")))
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        return jsonify({"message": "Credentials valid", "data": employee.to_public_dict()})
