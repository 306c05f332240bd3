# Services Package
from .notification_service import NotificationChannel, NotificationMessage, NotificationKind

__all__ = [
    "NotificationChannel",
    "NotificationMessage",
    "NotificationKind",
]
