from fastapi import APIRouter, Depends, HTTPException
from constants import NOT_FOUND_MESSAGE
from database.models import NotificationCreate
from dependencies import get_current_session, get_notification_service
from logic.errors import EntityNotFoundError
from logic.notifications import NotificationService
from logic.session import UserSession

router = APIRouter(prefix="/notifications", tags=["Notifications"])

@router.get("/", status_code=200) #GET endpoint for the logged in user's notifications, newest first
def list_notifications(
    unread_only: bool = False,
    session: UserSession = Depends(get_current_session),
    service: NotificationService = Depends(get_notification_service),
):
    notifications = service.for_user(session.user.id, unread_only=unread_only)
    return {
        "unread_count": service.unread_count(session.user.id),
        "notifications": [notification.model_dump() for notification in notifications],
    }

@router.post("/", status_code=201) #input is validated against NotificationCreate
def create_notification(notification_data: NotificationCreate, service: NotificationService = Depends(get_notification_service)):
    notification = service.notify(notification_data.user_id, notification_data.title, notification_data.message)
    return {"notification": notification.model_dump()}

@router.patch("/{notification_id}/read", status_code=200)
def mark_notification_read(notification_id: str, service: NotificationService = Depends(get_notification_service)):
    try:
        notification = service.mark_read(notification_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE.format(entity="Notification"))
    return {"notification": notification.model_dump()}

@router.post("/read-all", status_code=200)
def mark_all_notifications_read(
    session: UserSession = Depends(get_current_session),
    service: NotificationService = Depends(get_notification_service),
):
    return {"marked_read": service.mark_all_read(session.user.id)}
