from __future__ import annotations

from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "teacher_id" in session:
            return redirect(url_for("classes"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                teacher = container.auth_service.authenticate(email, password)

                session.permanent = bool(remember)
                app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

                session["teacher_id"] = teacher.teacher_id
                session["name"] = teacher.full_name
                session["email"] = teacher.email

                flash("Signed in.", "success")
                return redirect(url_for("classes"))
            except (AuthenticationError, ValidationError) as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Login failed")
                flash("System error while signing in", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("login"))
