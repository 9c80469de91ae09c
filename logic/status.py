from datetime import datetime
from enum import Enum
from sqlmodel import SQLModel
from enums import TaskStatusEnum, PaymentStatusEnum
from database.models import Task, Payment, Notification

#statuses are flat enums, any status may follow any other. Some statuses stamp a timestamp field the first time they are reached
DERIVED_TIMESTAMPS: dict[type[SQLModel], dict[Enum, str]] = {
    Task: {TaskStatusEnum.complete: "completed_at"},
    Payment: {
        PaymentStatusEnum.invoiced: "invoiced_at",
        PaymentStatusEnum.received: "received_at",
    },
}

def coerce_status(status_enum: type[Enum], new_status) -> Enum:
    try:
        return status_enum(new_status) #accepts both the enum member and its string value
    except ValueError:
        allowed = ", ".join(member.value for member in status_enum)
        raise ValueError(f"Invalid status {new_status!r}, expected one of: {allowed}") from None

def apply_status_side_effects(entity: SQLModel, now: datetime) -> list[str]: #returns the fields it stamped
    #a timestamp that is already set is left alone, so reaching the same status again never moves it
    derived_fields = DERIVED_TIMESTAMPS.get(type(entity), {})
    field_name = derived_fields.get(entity.status)
    if field_name is None or getattr(entity, field_name) is not None:
        return []
    setattr(entity, field_name, now)
    return [field_name]

def mark_notification_read(notification: Notification) -> bool: #returns whether anything changed
    if notification.read:
        return False
    notification.read = True
    return True
