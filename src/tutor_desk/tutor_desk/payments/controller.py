from __future__ import annotations

from flask import Flask, redirect, render_template, request, url_for

from ..common.notifications import Notification
from ..common.web import current_teacher_id, login_required
from ..core.enums import PaymentMethod
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/payments", methods=["GET"], endpoint="payments")
    @login_required
    def payments():
        items = []
        try:
            items = container.invoice_service.list_for_teacher(teacher_id=current_teacher_id())
        except DomainError as e:
            Notification.failure("Error loading invoices", str(e)).flash()

        return render_template(
            "payments/index.html",
            invoices=items,
            methods=list(PaymentMethod),
            active_page="payments",
        )

    @app.route("/payments/<invoice_id>", methods=["POST"], endpoint="payments_record")
    @login_required
    def payments_record(invoice_id: str):
        try:
            outcome = container.payment_service.record_payment(
                teacher_id=current_teacher_id(),
                invoice_id=invoice_id,
                amount=request.form.get("amount", ""),
                method=request.form.get("payment_method", PaymentMethod.CASH.value),
                notes=request.form.get("notes"),
            )
            Notification.success(
                "Payment processed", f"Payment of ${outcome.payment.amount:.2f} recorded successfully"
            ).flash()
        except DomainError as e:
            Notification.failure("Error processing payment", str(e)).flash()
        except Exception:
            app.logger.exception("Recording payment for invoice %s failed", invoice_id)
            Notification.failure("Error processing payment", "Failed to process payment").flash()

        return redirect(url_for("payments"))
