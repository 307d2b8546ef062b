from tutor_desk.common.notifications import Notification


def test_failure_is_danger_with_description():
    note = Notification.failure("Save failed", "timeout")

    assert note.category == "danger"
    assert note.message == "Save failed: timeout"


def test_success_without_description():
    note = Notification.success("Hourly rate updated")

    assert note.category == "success"
    assert note.message == "Hourly rate updated"
