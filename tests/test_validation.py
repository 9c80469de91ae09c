from datetime import date
from database.models import ClientCreate, PaymentCreate, TaskCreate
from enums import ClientStatusEnum
from logic.validation import validate

def test_client_example_reports_every_field():
    result = validate(ClientCreate, {"name": "", "email": "bad", "phone": "", "address": "", "status": "active"})

    assert not result.ok
    assert result.data is None
    assert result.messages_by_field() == {
        "name": ["Client name is required"],
        "email": ["Invalid email address"],
        "phone": ["Phone number is required"],
        "address": ["Address is required"],
    }

def test_valid_client():
    result = validate(ClientCreate, {
        "name": "Acme Corporation",
        "email": "contact@acmecorp.com",
        "phone": "555-123-4567",
        "address": "123 Business St",
        "notes": "   ",
    })
    assert result.ok
    assert result.data.status == ClientStatusEnum.active
    assert result.data.has_account is False
    assert result.data.notes is None #blank optional fields count as absent

def test_task_collects_all_errors():
    result = validate(TaskCreate, {
        "title": "ab",
        "client_id": "",
        "description": "too short",
        "estimated_hours": 0,
        "estimated_cost": "-5",
    })
    assert result.messages_by_field() == {
        "title": ["Title must be at least 3 characters"],
        "client_id": ["Please select a client"],
        "description": ["Description must be at least 10 characters"],
        "estimated_hours": ["Hours must be positive"],
        "estimated_cost": ["Cost must be positive"],
    }

def test_task_coerces_numbers_and_skips_blank_optionals():
    result = validate(TaskCreate, {
        "title": "Website Redesign",
        "client_id": "client-1",
        "description": "Complete redesign of the website",
        "estimated_hours": "40",
        "estimated_cost": "4000.50",
        "actual_hours": "",
        "due_date": "",
    })
    assert result.ok
    assert result.data.estimated_hours == 40.0
    assert result.data.estimated_cost == 4000.5
    assert result.data.actual_hours is None
    assert result.data.due_date is None

def test_payment_missing_fields_use_form_messages():
    result = validate(PaymentCreate, {})
    assert result.messages_by_field() == {
        "client_id": ["Client is required"],
        "task_id": ["Task is required"],
        "amount": ["Amount must be positive"],
        "due_date": ["Due date is required"],
    }

def test_payment_status_must_be_known():
    result = validate(PaymentCreate, {
        "client_id": "client-1",
        "task_id": "task-1",
        "amount": 100,
        "due_date": "2024-06-01",
        "status": "paid",
    })
    assert [error.field for error in result.errors] == ["status"]

def test_valid_payment():
    result = validate(PaymentCreate, {
        "client_id": "client-1",
        "task_id": "task-1",
        "amount": "99.99",
        "due_date": "2024-06-01",
        "invoice_number": "",
    })
    assert result.ok
    assert result.data.due_date == date(2024, 6, 1)
    assert result.data.invoice_number is None
