from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.notifications import Notification
from ..common.web import current_teacher_id, login_required
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/classes", methods=["GET", "POST"], endpoint="classes")
    @login_required
    def classes():
        teacher_id = current_teacher_id()

        if request.method == "POST":
            try:
                created = container.class_service.create(
                    teacher_id=teacher_id,
                    class_name=request.form.get("class_name", ""),
                    subject=request.form.get("subject"),
                    hourly_rate=request.form.get("hourly_rate"),
                )
                Notification.success("Class added", f"{created.class_name} has been added successfully").flash()
                return redirect(url_for("classes"))
            except DomainError as e:
                Notification.failure("Error adding class", str(e)).flash()
            except Exception:
                app.logger.exception("Adding class failed")
                Notification.failure("Error adding class", "Failed to add class").flash()

        items = []
        try:
            items = container.class_service.list_for_teacher(teacher_id=teacher_id)
        except DomainError as e:
            Notification.failure("Error loading classes", str(e)).flash()

        return render_template("classes/index.html", classes=items, active_page="classes")

    @app.route("/classes/<class_id>/delete", methods=["POST"], endpoint="classes_delete")
    @login_required
    def classes_delete(class_id: str):
        name = request.form.get("class_name") or "Class"
        try:
            container.class_service.delete(teacher_id=current_teacher_id(), class_id=class_id)
            Notification.success("Class deleted", f"{name} has been deleted").flash()
        except DomainError as e:
            Notification.failure("Error deleting class", str(e)).flash()
        except Exception:
            app.logger.exception("Deleting class %s failed", class_id)
            Notification.failure("Error deleting class", "Failed to delete class").flash()
        return redirect(url_for("classes"))

    @app.route("/classes/<class_id>/rename", methods=["POST"], endpoint="classes_rename")
    @login_required
    def classes_rename(class_id: str):
        try:
            changed = container.class_service.rename(
                teacher_id=current_teacher_id(),
                class_id=class_id,
                current_name=request.form.get("current_name", ""),
                new_name=request.form.get("class_name"),
            )
            if changed:
                Notification.success("Class name updated").flash()
        except DomainError as e:
            Notification.failure("Could not update name", str(e)).flash()
        except Exception:
            app.logger.exception("Renaming class %s failed", class_id)
            Notification.failure("Could not update name", "Failed to update class").flash()
        return redirect(url_for("classes"))

    @app.route("/classes/<class_id>/rate", methods=["POST"], endpoint="classes_rate")
    @login_required
    def classes_rate(class_id: str):
        try:
            container.class_service.update_rate(
                teacher_id=current_teacher_id(),
                class_id=class_id,
                hourly_rate=request.form.get("hourly_rate"),
            )
            Notification.success("Hourly rate updated").flash()
        except DomainError as e:
            Notification.failure("Could not update rate", str(e)).flash()
        except Exception:
            app.logger.exception("Updating rate of class %s failed", class_id)
            Notification.failure("Could not update rate", "Failed to update class").flash()
        return redirect(url_for("classes"))
