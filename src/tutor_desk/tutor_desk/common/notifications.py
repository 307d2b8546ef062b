from __future__ import annotations

from dataclasses import dataclass

from flask import flash


@dataclass(frozen=True)
class Notification:
    """The single user-visible outcome of an operation."""

    title: str
    description: str = ""
    failed: bool = False

    @classmethod
    def success(cls, title: str, description: str = "") -> "Notification":
        return cls(title=title, description=description, failed=False)

    @classmethod
    def failure(cls, title: str, description: str = "") -> "Notification":
        return cls(title=title, description=description, failed=True)

    @property
    def category(self) -> str:
        return "danger" if self.failed else "success"

    @property
    def message(self) -> str:
        if not self.description:
            return self.title
        return f"{self.title}: {self.description}"

    def flash(self) -> None:
        flash(self.message, self.category)
