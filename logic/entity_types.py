from database.models import (
    Client, ClientCreate,
    Task, TaskCreate,
    Payment, PaymentCreate,
    Notification, NotificationCreate,
)
from enums import ClientStatusEnum, TaskStatusEnum, PaymentStatusEnum
from logic.store import EntityType

CLIENT = EntityType(name="Client", model=Client, schema=ClientCreate, status_enum=ClientStatusEnum)
TASK = EntityType(name="Task", model=Task, schema=TaskCreate, status_enum=TaskStatusEnum)
PAYMENT = EntityType(name="Payment", model=Payment, schema=PaymentCreate, status_enum=PaymentStatusEnum)
NOTIFICATION = EntityType(name="Notification", model=Notification, schema=NotificationCreate) #notifications track read instead of a status
