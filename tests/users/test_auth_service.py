from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from tutor_desk.core.exceptions import AuthenticationError, ValidationError
from tutor_desk.users.model import Teacher
from tutor_desk.users.service import AuthService


class InMemoryTeachers:
    def __init__(self, *teachers: Teacher):
        self.by_email = {t.email: t for t in teachers}

    def get_by_email(self, email):
        return self.by_email.get(email)


def _teacher(**overrides):
    data = dict(
        teacher_id="t1",
        email="demo@tutordesk.local",
        full_name="Demo Tutor",
        password_hash=generate_password_hash("tutor123"),
    )
    data.update(overrides)
    return Teacher(**data)


def test_authenticate_lowercases_email():
    svc = AuthService(InMemoryTeachers(_teacher()))

    teacher = svc.authenticate("Demo@TutorDesk.local", "tutor123")

    assert teacher.teacher_id == "t1"
    assert teacher.full_name == "Demo Tutor"


def test_wrong_password():
    svc = AuthService(InMemoryTeachers(_teacher()))

    with pytest.raises(AuthenticationError):
        svc.authenticate("demo@tutordesk.local", "nope")


def test_inactive_teacher_cannot_sign_in():
    svc = AuthService(InMemoryTeachers(_teacher(is_active=False)))

    with pytest.raises(AuthenticationError):
        svc.authenticate("demo@tutordesk.local", "tutor123")


def test_placeholder_hash_is_rejected_not_crashing():
    svc = AuthService(InMemoryTeachers(_teacher(password_hash="CHANGE_ME")))

    with pytest.raises(AuthenticationError):
        svc.authenticate("demo@tutordesk.local", "CHANGE_ME")


def test_email_required():
    with pytest.raises(ValidationError):
        AuthService(InMemoryTeachers()).authenticate("", "x")
