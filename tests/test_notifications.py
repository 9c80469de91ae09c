import pytest
from logic.entity_types import NOTIFICATION
from logic.errors import EntityNotFoundError, EntityValidationError
from logic.notifications import NotificationService
from logic.store import EntityStore

@pytest.fixture
def service(clock):
    return NotificationService(EntityStore(NOTIFICATION, clock=clock))

def test_notifications_are_per_user_newest_first(service, clock):
    older = service.notify("1", "Payment received", "Acme Corporation paid invoice INV-001")
    clock.advance(minutes=1)
    newer = service.notify("1", "Task submitted", "Website Redesign is ready for review")
    service.notify("2", "Welcome", "Your portal account is ready")

    assert [n.id for n in service.for_user("1")] == [newer.id, older.id]
    assert service.unread_count("1") == 2
    assert service.unread_count("2") == 1

def test_mark_read_only_goes_one_way(service):
    notification = service.notify("1", "Task submitted", "Website Redesign is ready for review")
    assert notification.read is False

    first = service.mark_read(notification.id)
    assert first.read is True
    second = service.mark_read(notification.id)
    assert second.read is True
    assert second.revision == first.revision #reading twice writes nothing

def test_mark_all_read(service):
    for i in range(3):
        service.notify("1", f"Update {i}", "Something changed")
    service.mark_read(service.for_user("1")[0].id)

    assert service.mark_all_read("1") == 2
    assert service.unread_count("1") == 0
    assert service.mark_all_read("1") == 0

def test_blank_notification_is_rejected(service):
    with pytest.raises(EntityValidationError):
        service.notify("1", "", "Message without a title")
    assert service.for_user("1") == []

def test_mark_read_unknown(service):
    with pytest.raises(EntityNotFoundError):
        service.mark_read("missing")
