from __future__ import annotations

from typing import Optional, Protocol

from .model import Teacher


class TeacherRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[Teacher]:
        raise NotImplementedError
