import logging
from database.models import Notification
from logic.status import mark_notification_read
from logic.store import EntityStore

logger = logging.getLogger(__name__)

class NotificationService: #per-user notifications on top of the notification store
    def __init__(self, store: EntityStore[Notification]):
        self.store = store

    def notify(self, user_id: str, title: str, message: str) -> Notification:
        notification = self.store.create({"user_id": user_id, "title": title, "message": message}) #the store rejects blank fields
        logger.info("Notified user %s: %s", user_id, notification.title)
        return notification

    def for_user(self, user_id: str, unread_only: bool = False) -> list[Notification]:
        notifications = [n for n in self.store.list() if n.user_id == user_id]
        if unread_only:
            notifications = [n for n in notifications if not n.read]
        return sorted(notifications, key=lambda n: n.created_at, reverse=True) #newest first

    def unread_count(self, user_id: str) -> int:
        return len(self.for_user(user_id, unread_only=True))

    def mark_read(self, notification_id: str) -> Notification:
        notification = self.store.get(notification_id)
        if not mark_notification_read(notification): #already read, nothing to write
            return notification
        return self.store.update(notification_id, {"read": True})

    def mark_all_read(self, user_id: str) -> int:
        unread = self.for_user(user_id, unread_only=True)
        for notification in unread:
            self.store.update(notification.id, {"read": True})
        logger.info("Marked %d notifications read for user %s", len(unread), user_id)
        return len(unread)
