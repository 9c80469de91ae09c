from enum import Enum

#enums set the fixed options a status field can take. Values are the exact literals sent over the wire so they are case sensitive

class ClientStatusEnum(str, Enum): #client lifecycle
    active = "active"
    idle = "idle"
    gone = "gone"

class TaskStatusEnum(str, Enum): #task lifecycle, roughly in the order work moves through it but any status can follow any other
    requirements = "requirements"
    quote = "quote"
    approved = "approved"
    progress = "progress"
    submitted = "submitted"
    feedback = "feedback"
    complete = "complete"

class PaymentStatusEnum(str, Enum):
    due = "due"
    invoiced = "invoiced"
    pending = "pending"
    received = "received"
    overdue = "overdue"
    canceled = "canceled"

class UserRoleEnum(str, Enum):
    admin = "admin"
    client = "client"

class StoreBackendEnum(str, Enum): #where entity stores keep their records
    memory = "memory"
    sql = "sql"
