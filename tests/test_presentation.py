from enums import ClientStatusEnum, PaymentStatusEnum, TaskStatusEnum
from logic.presentation import display_metadata, format_currency, row_accent, status_badge, status_label

def test_client_badges_follow_status():
    assert status_badge(ClientStatusEnum.active) == "bg-green-100 text-green-800 hover:bg-green-200"
    assert status_badge("idle") == "bg-amber-100 text-amber-800 hover:bg-amber-200"
    assert row_accent(ClientStatusEnum.gone) == "border-l-4 border-l-red-500"

def test_payment_badges_follow_status():
    assert status_badge(PaymentStatusEnum.invoiced) == "bg-purple-100 text-purple-800 hover:bg-purple-200"
    assert row_accent(PaymentStatusEnum.canceled) == "border-l-4 border-l-gray-500"

def test_every_status_has_display_metadata():
    for status_enum in (ClientStatusEnum, TaskStatusEnum, PaymentStatusEnum):
        for status in status_enum:
            assert row_accent(status) != ""

def test_unknown_status_falls_back_to_grey():
    assert status_badge("archived") == "bg-gray-100 text-gray-800 hover:bg-gray-200"
    assert row_accent("archived") == ""

def test_display_metadata():
    assert display_metadata(TaskStatusEnum.progress) == {
        "label": "Progress",
        "badge": "bg-amber-100 text-amber-800 hover:bg-amber-200",
        "row_accent": "border-l-4 border-l-amber-500",
    }
    assert status_label("overdue") == "Overdue"

def test_format_currency():
    assert format_currency(1250) == "$1,250.00"
    assert format_currency(99.999) == "$100.00"
    assert format_currency(-5) == "-$5.00"
