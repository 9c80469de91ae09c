from typing import ClassVar
from pydantic import BaseModel, ValidationInfo, field_validator
from datetime import date, datetime, timezone
from sqlmodel import SQLModel, Field
from email_validator import validate_email, EmailNotValidError
from enums import ClientStatusEnum, TaskStatusEnum, PaymentStatusEnum, UserRoleEnum #import enums from enums.py to have access to fixed choices in models

def utc_now() -> datetime:
    return datetime.now(timezone.utc) #stored timestamps are always timezone aware

#table models are what the stores keep. They are never validated on construction so all input goes through the matching *Create schema first

class Client(SQLModel, table=True):
    id: str = Field(primary_key=True) #id is assigned by the entity store when the client is created
    name: str
    email: str
    phone: str
    address: str
    status: ClientStatusEnum = Field(default=ClientStatusEnum.active)
    has_account: bool = Field(default=False) #true once portal credentials were issued
    notes: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    revision: int = Field(default=1) #bumped on every mutation so stale edits can be rejected

class Task(SQLModel, table=True):
    id: str = Field(primary_key=True)
    title: str
    client_id: str = Field(index=True) #plain reference, not checked against the client store
    description: str
    status: TaskStatusEnum = Field(default=TaskStatusEnum.requirements)
    estimated_hours: float
    estimated_cost: float
    actual_hours: float | None = Field(default=None)
    actual_cost: float | None = Field(default=None)
    due_date: date | None = Field(default=None)
    completed_at: datetime | None = Field(default=None) #stamped the first time status becomes complete
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    revision: int = Field(default=1)

class Payment(SQLModel, table=True):
    id: str = Field(primary_key=True)
    task_id: str = Field(index=True)
    client_id: str = Field(index=True)
    amount: float
    status: PaymentStatusEnum = Field(default=PaymentStatusEnum.due)
    due_date: date
    invoice_number: str | None = Field(default=None)
    invoiced_at: datetime | None = Field(default=None)
    received_at: datetime | None = Field(default=None)
    notes: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    revision: int = Field(default=1)

class Notification(SQLModel, table=True):
    id: str = Field(primary_key=True)
    user_id: str = Field(index=True)
    title: str
    message: str
    read: bool = Field(default=False) #only ever goes from False to True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    revision: int = Field(default=1)


def blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value

class FormSchema(BaseModel): #required_messages holds the text shown for a missing or blank field, whichever way it went wrong
    required_messages: ClassVar[dict[str, str]] = {}

    @classmethod
    def required_message(cls, field_name: str) -> str:
        return cls.required_messages.get(field_name, "This field is required")

class ClientCreate(FormSchema): #ClientCreate is used to validate client form input, id and timestamps excluded since they are auto generated
    name: str
    email: str
    phone: str
    address: str
    status: ClientStatusEnum = ClientStatusEnum.active
    has_account: bool = False
    notes: str | None = None

    required_messages: ClassVar[dict[str, str]] = {
        "name": "Client name is required",
        "email": "Invalid email address",
        "phone": "Phone number is required",
        "address": "Address is required",
    }

    @field_validator("name", "phone", "address")
    @classmethod
    def check_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(cls.required_message(info.field_name))
        return value.strip()

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        value = value.strip()
        try:
            validate_email(value, check_deliverability=False) #syntax only, no DNS lookups
        except EmailNotValidError:
            raise ValueError("Invalid email address") from None
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def optional_blank(cls, value):
        return blank_to_none(value)

class TaskCreate(FormSchema):
    title: str
    client_id: str
    description: str
    status: TaskStatusEnum = TaskStatusEnum.requirements
    estimated_hours: float
    estimated_cost: float
    actual_hours: float | None = None
    actual_cost: float | None = None
    due_date: date | None = None

    required_messages: ClassVar[dict[str, str]] = {
        "title": "Title must be at least 3 characters",
        "client_id": "Please select a client",
        "description": "Description must be at least 10 characters",
        "estimated_hours": "Hours must be positive",
        "estimated_cost": "Cost must be positive",
    }

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 3:
            raise ValueError("Title must be at least 3 characters")
        if len(value) > 100:
            raise ValueError("Title must be at most 100 characters")
        return value

    @field_validator("description")
    @classmethod
    def check_description(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 10:
            raise ValueError("Description must be at least 10 characters")
        if len(value) > 500:
            raise ValueError("Description must be at most 500 characters")
        return value

    @field_validator("client_id")
    @classmethod
    def check_client_selected(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Please select a client")
        return value.strip()

    @field_validator("estimated_hours", "estimated_cost", mode="before")
    @classmethod
    def required_number(cls, value, info: ValidationInfo):
        if value is None or (isinstance(value, str) and not value.strip()): #an empty number input counts as zero, which is not positive
            raise ValueError(cls.required_message(info.field_name))
        return value

    @field_validator("estimated_hours", "estimated_cost")
    @classmethod
    def check_positive(cls, value: float, info: ValidationInfo) -> float:
        if value <= 0:
            raise ValueError(cls.required_message(info.field_name))
        return value

    @field_validator("actual_hours", "actual_cost", "due_date", mode="before")
    @classmethod
    def optional_blank(cls, value):
        return blank_to_none(value)

    @field_validator("actual_hours", "actual_cost")
    @classmethod
    def check_actual_positive(cls, value: float | None, info: ValidationInfo) -> float | None:
        if value is not None and value <= 0:
            label = "Actual hours" if info.field_name == "actual_hours" else "Actual cost"
            raise ValueError(f"{label} must be positive")
        return value

class PaymentCreate(FormSchema):
    client_id: str
    task_id: str
    amount: float
    status: PaymentStatusEnum = PaymentStatusEnum.due
    due_date: date
    invoice_number: str | None = None
    notes: str | None = None

    required_messages: ClassVar[dict[str, str]] = {
        "client_id": "Client is required",
        "task_id": "Task is required",
        "amount": "Amount must be positive",
        "due_date": "Due date is required",
    }

    @field_validator("client_id", "task_id")
    @classmethod
    def check_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(cls.required_message(info.field_name))
        return value.strip()

    @field_validator("amount", "due_date", mode="before")
    @classmethod
    def required_value(cls, value, info: ValidationInfo):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError(cls.required_message(info.field_name))
        return value

    @field_validator("amount")
    @classmethod
    def check_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Amount must be positive")
        return value

    @field_validator("invoice_number", "notes", mode="before")
    @classmethod
    def optional_blank(cls, value):
        return blank_to_none(value)

class NotificationCreate(FormSchema):
    user_id: str
    title: str
    message: str
    read: bool = False

    required_messages: ClassVar[dict[str, str]] = {
        "user_id": "User is required",
        "title": "Title is required",
        "message": "Message is required",
    }

    @field_validator("user_id", "title", "message")
    @classmethod
    def check_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise ValueError(cls.required_message(info.field_name))
        return value.strip()

class User(BaseModel): #logged in user record, kept in the session slot rather than a table
    id: str
    email: str
    name: str
    role: UserRoleEnum
    client_id: str | None = None #set for client logins, links the user to their client record
    last_login: datetime | None = None
