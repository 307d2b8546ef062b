from __future__ import annotations

from dataclasses import replace
from datetime import date

from flask import Flask, redirect, render_template, request, session, url_for

from ..common.datetime_utils import month_label_for, now_local, parse_iso_date
from ..common.notifications import Notification
from ..common.web import current_teacher_id, login_required
from ..core.exceptions import DomainError
from ..container import Container
from .cache import LessonDateCache
from .grid import AttendanceGrid


def month_arg(source) -> str:
    return (source.get("month") or "").strip() or month_label_for(now_local().date())


def custom_dates_arg(source) -> list[date]:
    """Comma separated ISO dates, e.g. "2025-08-05,2025-08-12".

    Returned sorted and unique, whatever order the teacher typed them in.
    """

    raw = source.get("dates") or ""
    return sorted({parse_iso_date(part) for part in raw.replace(" ", "").split(",") if part})


def register(app: Flask, container: Container) -> None:
    def _load_view(teacher_id: str, class_id: str, source):
        tutor_class = container.class_service.get(teacher_id=teacher_id, class_id=class_id)
        enrollment = container.attendance_service.lookup_enrollment(teacher_id=teacher_id, class_id=class_id)
        students = container.student_service.list_for_enrollment(teacher_id=teacher_id, lookup=enrollment)
        return container.attendance_service.load_view(
            teacher_id=teacher_id,
            tutor_class=tutor_class,
            month_label=month_arg(source),
            students=students,
            custom_dates=custom_dates_arg(source),
            cache=LessonDateCache(session),
            enrollment=enrollment,
        )

    @app.route("/attendance", methods=["GET"], endpoint="attendance_select")
    @login_required
    def attendance_select():
        class_id = request.args.get("class_id")
        if class_id:
            return redirect(
                url_for(
                    "attendance_grid",
                    class_id=class_id,
                    month=month_arg(request.args),
                    dates=request.args.get("dates") or None,
                )
            )

        items = []
        try:
            items = container.class_service.list_for_teacher(teacher_id=current_teacher_id())
        except DomainError as e:
            Notification.failure("Error loading classes", str(e)).flash()

        return render_template(
            "attendance/select.html",
            classes=items,
            month=month_label_for(now_local().date()),
            active_page="attendance",
        )

    @app.route("/classes/<class_id>/attendance", methods=["GET"], endpoint="attendance_grid")
    @login_required
    def attendance_grid(class_id: str):
        try:
            view = _load_view(current_teacher_id(), class_id, request.args)
        except DomainError as e:
            Notification.failure("Error loading students", str(e)).flash()
            return redirect(url_for("attendance_select"))
        except Exception:
            app.logger.exception("Loading attendance for class %s failed", class_id)
            Notification.failure("Error loading students", "Failed to load attendance").flash()
            return redirect(url_for("attendance_select"))

        return render_template(
            "attendance/grid.html",
            view=view,
            rows=view.rows(),
            dates_arg=request.args.get("dates") or "",
            active_page="attendance",
        )

    @app.route("/classes/<class_id>/attendance", methods=["POST"], endpoint="attendance_save")
    @login_required
    def attendance_save(class_id: str):
        teacher_id = current_teacher_id()
        month = month_arg(request.form)
        dates = request.form.get("dates") or None

        try:
            view = _load_view(teacher_id, class_id, request.form)
        except DomainError as e:
            Notification.failure("Error loading students", str(e)).flash()
            return redirect(url_for("attendance_select"))
        except Exception:
            app.logger.exception("Loading attendance for class %s failed", class_id)
            Notification.failure("Error loading students", "Failed to load attendance").flash()
            return redirect(url_for("attendance_select"))

        grid = AttendanceGrid.from_checked_keys(request.form.getlist("present"))
        try:
            result = container.attendance_service.save(
                teacher_id=teacher_id,
                tutor_class=view.tutor_class,
                students=view.students,
                resolved=view.resolved,
                grid=grid,
                cache=LessonDateCache(session),
            )
        except DomainError as e:
            Notification.failure("Save failed", str(e)).flash()
        except Exception:
            app.logger.exception("Saving attendance for class %s failed", class_id)
            Notification.failure("Save failed", "Failed to save attendance.").flash()
        else:
            Notification.success("Attendance saved", f"Updated {result.updated} entries for {result.month}.").flash()
            return redirect(url_for("attendance_grid", class_id=class_id, month=month, dates=dates))

        # Unsaved marks stay on screen so the teacher can retry.
        unsaved = replace(view, grid=grid)
        return render_template(
            "attendance/grid.html",
            view=unsaved,
            rows=unsaved.rows(),
            dates_arg=dates or "",
            active_page="attendance",
        )
