from __future__ import annotations

import json
from typing import Any, MutableMapping, Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import LESSON_DATE_CACHE_PREFIX
from ..core.exceptions import ParseError


class LessonDateCache:
    """Per-browser memory of the last saved lesson dates for a class+month.

    Backed by any mutable mapping: the Flask session in the web app, a dict in tests.
    """

    def __init__(self, store: MutableMapping[str, Any]):
        self._store = store

    @staticmethod
    def key_for(class_id: str, month_label: str) -> str:
        return f"{LESSON_DATE_CACHE_PREFIX}:{class_id}:{month_label}"

    def get(self, class_id: str, month_label: str) -> Optional[list[str]]:
        raw = self._store.get(self.key_for(class_id, month_label))
        if not raw:
            return None
        try:
            dates = json.loads(raw)
        except (TypeError, ValueError):
            return None
        if not isinstance(dates, list):
            return None
        try:
            for d in dates:
                parse_iso_date(d)
        except ParseError:
            return None
        return [str(d) for d in dates]

    def put(self, class_id: str, month_label: str, iso_dates: Sequence[str]) -> None:
        self._store[self.key_for(class_id, month_label)] = json.dumps(list(iso_dates))
