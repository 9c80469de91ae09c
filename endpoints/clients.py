from fastapi import Depends, HTTPException
from dependencies import get_client_store
from endpoints.entities import build_entity_router, not_found, serialize
from logic.accounts import create_account, resend_credentials
from logic.entity_types import CLIENT
from logic.errors import EntityNotFoundError
from logic.store import EntityStore

router = build_entity_router(CLIENT, get_client_store, key="client") #list, form, status and delete endpoints all come from the shared builder

@router.post("/{client_id}/account", status_code=200) #POST endpoint to give a client portal access
def create_client_account(client_id: str, store: EntityStore = Depends(get_client_store)):
    try:
        client, message = create_account(store, client_id)
    except EntityNotFoundError:
        raise not_found(CLIENT)
    return {"message": message, "client": serialize(client)}

@router.post("/{client_id}/credentials", status_code=200)
def resend_client_credentials(client_id: str, store: EntityStore = Depends(get_client_store)):
    try:
        message = resend_credentials(store, client_id)
    except EntityNotFoundError:
        raise not_found(CLIENT)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e)) #client exists but has no account to resend for
    return {"message": message}
