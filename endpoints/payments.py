from sqlmodel import SQLModel
from dependencies import get_payment_store
from endpoints.entities import build_entity_router, serialize
from logic.entity_types import PAYMENT
from logic.presentation import format_currency

def serialize_payment(payment: SQLModel) -> dict:
    serialized = serialize(payment)
    serialized["display"]["amount"] = format_currency(payment.amount) #payments list shows the amount as currency
    return serialized

router = build_entity_router(PAYMENT, get_payment_store, key="payment", serializer=serialize_payment)
