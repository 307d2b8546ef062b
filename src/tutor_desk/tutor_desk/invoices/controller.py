from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.notifications import Notification
from ..common.web import current_teacher_id, login_required
from ..core.constants import DEFAULT_HOURLY_RATE
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/invoices", methods=["GET"], endpoint="invoices")
    @login_required
    def invoices():
        teacher_id = current_teacher_id()
        class_id = request.args.get("class_id") or ""
        student_id = request.args.get("student_id") or ""
        month = request.args.get("month") or ""

        classes, students, summary = [], [], None
        selected_class = None
        try:
            classes = container.class_service.list_for_teacher(teacher_id=teacher_id)
            selected_class = next((c for c in classes if c.class_id == class_id), None)
            if selected_class:
                students = container.student_service.list_for_class(teacher_id=teacher_id, class_id=class_id)
            if selected_class and student_id and month:
                summary = container.invoice_service.attendance_summary(
                    teacher_id=teacher_id, class_id=class_id, student_id=student_id, month=month
                )
        except DomainError as e:
            Notification.failure("Error loading attendance", str(e)).flash()

        rate = request.args.get("hourly_rate")
        if not rate:
            if selected_class and selected_class.hourly_rate is not None:
                rate = selected_class.hourly_rate
            else:
                rate = app.config.get("DEFAULT_HOURLY_RATE", DEFAULT_HOURLY_RATE)

        return render_template(
            "invoices/index.html",
            classes=classes,
            students=students,
            summary=summary,
            class_id=class_id,
            student_id=student_id,
            month=month,
            hourly_rate=rate,
            active_page="invoices",
        )

    @app.route("/invoices", methods=["POST"], endpoint="invoices_generate")
    @login_required
    def invoices_generate():
        class_id = request.form.get("class_id", "")
        month = request.form.get("month", "")
        rate = request.form.get("hourly_rate", "")
        try:
            invoice = container.invoice_service.generate(
                teacher_id=current_teacher_id(),
                class_id=class_id,
                student_id=request.form.get("student_id", ""),
                month=month,
                hourly_rate=rate,
            )
            Notification.success(
                "Invoice generated", f"{invoice.invoice_number} created for ${invoice.total_amount:.2f}."
            ).flash()
        except DomainError as e:
            Notification.failure("Error generating invoice", str(e)).flash()
        except Exception:
            app.logger.exception("Generating invoice failed")
            Notification.failure("Error generating invoice", "Failed to generate invoice").flash()

        # Keep class/rate/month for quicker repeats; clear the student.
        return redirect(url_for("invoices", class_id=class_id, month=month, hourly_rate=rate))
