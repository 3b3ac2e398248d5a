from __future__ import annotations

from enum import Enum


class CollectionName(str, Enum):
    """The six independent record collections."""

    CLIENTS = "clients"
    APPOINTMENTS = "appointments"
    SERVICES = "services"
    TRANSACTIONS = "transactions"
    INVENTORY = "inventory"
    NOTIFICATIONS = "notifications"


class AppointmentStatus(str, Enum):
    """Estado de una cita."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class NotificationType(str, Enum):
    APPOINTMENT = "appointment"
    BIRTHDAY = "birthday"
    LOW_STOCK = "lowStock"
    REMINDER = "reminder"
