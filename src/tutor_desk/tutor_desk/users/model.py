from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Teacher:
    """Domain entity: the tutor who owns classes, students and invoices."""

    teacher_id: str
    email: str
    full_name: str
    password_hash: str
    is_active: bool = True
