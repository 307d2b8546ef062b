from __future__ import annotations

from enum import Enum


class PaymentStatus(str, Enum):
    """Student-level payment status. Unset is stored as NULL."""

    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    OVERDUE = "overdue"


class PaymentMethod(str, Enum):
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"
    CARD = "card"
    OTHER = "other"


class DateSource(str, Enum):
    """Which tier produced the attendance grid columns."""

    CUSTOM = "custom"
    SCHEDULE = "schedule"
    CACHE = "cache"
    FULL_MONTH = "full_month"
