from .notifications import INotificationService

__all__ = ["INotificationService"]
