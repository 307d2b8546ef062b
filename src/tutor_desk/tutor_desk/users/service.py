from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .repository import TeacherRepository


@dataclass(frozen=True)
class SessionTeacher:
    """What we store into Flask session after login."""

    teacher_id: str
    full_name: str
    email: str


class AuthService:
    """Use case: authenticate teacher (login)."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    def authenticate(self, email: str, password: str) -> SessionTeacher:
        email = require_non_empty(email, "Email").lower()
        teacher = self._teachers.get_by_email(email)
        if not teacher or not teacher.is_active:
            raise AuthenticationError("Wrong email or password")

        try:
            ok = check_password_hash(teacher.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Wrong email or password")

        return SessionTeacher(teacher_id=teacher.teacher_id, full_name=teacher.full_name, email=teacher.email)
