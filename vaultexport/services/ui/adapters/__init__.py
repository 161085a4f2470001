from .console_notifications import ConsoleNotificationService

__all__ = ["ConsoleNotificationService"]
