from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import RemoteOperationError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Connection + cursor for one operation; commits on success.

    Driver errors surface as RemoteOperationError carrying the server message.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise RemoteOperationError(e.msg or str(e)) from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise RemoteOperationError(e.msg or str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(values: Sequence[Any]) -> str:
    """Placeholder list for `IN (...)`; callers must not pass an empty sequence."""

    return ", ".join(["%s"] * len(values))


def as_date(value: Any) -> Optional[date]:
    """Normalize DATE/DATETIME/str column values to `date`."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")


def as_money(value: Any) -> Optional[float]:
    """DECIMAL columns come back as Decimal; the domain uses float."""

    if value is None:
        return None
    return float(value)
