from __future__ import annotations

from flask import Flask, redirect, request, session, url_for

from ..attendance.cache import LessonDateCache
from ..attendance.controller import custom_dates_arg, month_arg
from ..common.notifications import Notification
from ..common.web import current_teacher_id, login_required
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes/<class_id>/students", methods=["POST"], endpoint="students_add")
    @login_required
    def students_add(class_id: str):
        teacher_id = current_teacher_id()
        month = month_arg(request.form)
        dates = request.form.get("dates") or None

        try:
            container.class_service.get(teacher_id=teacher_id, class_id=class_id)
            # New students are enrolled on the dates the grid currently shows.
            resolved = container.attendance_service.resolve_dates(
                teacher_id=teacher_id,
                class_id=class_id,
                month_label=month,
                custom_dates=custom_dates_arg(request.form),
                cache=LessonDateCache(session),
            )
            student = container.student_service.add_student(
                teacher_id=teacher_id,
                class_id=class_id,
                student_name=request.form.get("student_name", ""),
                parent_email=request.form.get("parent_email"),
                lesson_dates=resolved.dates,
            )
            Notification.success("Student added", f"{student.student_name} enrolled for {len(resolved)} lessons").flash()
        except DomainError as e:
            Notification.failure("Error adding student", str(e)).flash()
        except Exception:
            app.logger.exception("Adding student to class %s failed", class_id)
            Notification.failure("Error adding student", "Failed to add student").flash()

        return redirect(url_for("attendance_grid", class_id=class_id, month=month, dates=dates))
