import pytest
from datetime import date
from enums import ClientStatusEnum, PaymentStatusEnum, TaskStatusEnum
from logic.entity_types import CLIENT, PAYMENT, TASK
from logic.errors import EntityNotFoundError
from logic.forms import FormFlow
from logic.store import EntityStore

CLIENT_FORM = {
    "name": "Globex Industries",
    "email": "info@globexindustries.com",
    "phone": "555-987-6543",
    "address": "456 Enterprise Ave, Corporate Park, NY 10001",
    "status": "idle",
}

def test_open_without_id_gives_create_defaults():
    form = FormFlow(EntityStore(CLIENT))
    values = form.open()

    assert not form.is_editing
    assert values == {
        "name": "",
        "email": "",
        "phone": "",
        "address": "",
        "status": ClientStatusEnum.active,
        "has_account": False,
        "notes": None,
    }

def test_task_and_payment_defaults(clock):
    task_values = FormFlow(EntityStore(TASK)).open()
    assert task_values["status"] == TaskStatusEnum.requirements
    assert task_values["estimated_hours"] == 0
    assert task_values["due_date"] is None

    payment_values = FormFlow(EntityStore(PAYMENT, clock=clock)).open()
    assert payment_values["status"] == PaymentStatusEnum.due
    assert payment_values["due_date"] == date(2024, 5, 1) #today, per the store clock

def test_open_unknown_id_raises_instead_of_creating():
    form = FormFlow(EntityStore(CLIENT))
    with pytest.raises(EntityNotFoundError):
        form.open("missing-client")
    assert not form.is_open
    assert not form.is_editing

def test_submit_create():
    store = EntityStore(CLIENT)
    form = FormFlow(store)
    form.open()
    result = form.submit(CLIENT_FORM)

    assert result.ok
    assert result.message == "Client added successfully"
    assert result.entity.status == ClientStatusEnum.idle
    assert [c.id for c in store.list()] == [result.entity.id]
    assert not form.is_open

def test_submit_invalid_returns_errors_without_writing():
    store = EntityStore(CLIENT)
    form = FormFlow(store)
    form.open()
    result = form.submit({**CLIENT_FORM, "email": "not-an-email", "name": ""})

    assert not result.ok
    assert {error.field for error in result.errors} == {"email", "name"}
    assert store.list() == []
    assert form.is_open #the form stays open so the user can fix the input

def test_edit_prefills_and_updates():
    store = EntityStore(CLIENT)
    client = store.create({**CLIENT_FORM, "has_account": True})
    form = FormFlow(store)

    values = form.open(client.id)
    assert form.is_editing
    assert values["name"] == "Globex Industries"
    assert values["has_account"] is True

    result = form.submit({**CLIENT_FORM, "phone": "555-000-1111"})
    assert result.ok
    assert result.message == "Client updated successfully"
    assert result.entity.id == client.id
    assert result.entity.phone == "555-000-1111"
    assert result.entity.has_account is True #not part of the submitted form, so left as it was
    assert result.entity.revision == 2

def test_edit_of_deleted_entity_raises():
    store = EntityStore(CLIENT)
    client = store.create(dict(CLIENT_FORM))
    form = FormFlow(store)
    form.open(client.id)
    store.delete(client.id)

    with pytest.raises(EntityNotFoundError):
        form.submit(CLIENT_FORM)
    assert store.list() == []

def test_edit_task_to_complete_stamps_completed_at(clock):
    store = EntityStore(TASK, clock=clock)
    form = FormFlow(store)
    form.open()
    task = form.submit({
        "title": "Logo refresh",
        "client_id": "client-2",
        "description": "New logo and brand colours",
        "estimated_hours": 12,
        "estimated_cost": 1200,
    }).entity
    assert task.completed_at is None

    clock.advance(days=3)
    values = form.open(task.id)
    result = form.submit({**values, "status": "complete", "actual_hours": 14, "actual_cost": 1400})
    assert result.message == "Task updated successfully"
    assert result.entity.completed_at == clock.now

def test_cancel_discards_form():
    store = EntityStore(PAYMENT)
    form = FormFlow(store)
    form.open()
    form.cancel()

    assert store.list() == []
    with pytest.raises(RuntimeError):
        form.submit({"client_id": "client-1", "task_id": "task-1", "amount": 10, "due_date": "2024-06-01"})
