from typing import Any, Callable
from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import SQLModel
from constants import DELETED_MESSAGE, NOT_FOUND_MESSAGE, STATUS_UPDATED_MESSAGE
from logic.errors import EntityNotFoundError, RevisionConflictError
from logic.forms import FormFlow
from logic.presentation import display_metadata
from logic.store import EntityStore, EntityType

class StatusChange(BaseModel):
    status: str

def serialize(entity: SQLModel) -> dict:
    return {**entity.model_dump(), "display": display_metadata(entity.status)} #display is derived from status on the way out, never stored

def not_found(entity_type: EntityType) -> HTTPException:
    return HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE.format(entity=entity_type.name))

def build_entity_router(
    entity_type: EntityType,
    get_store: Callable[..., EntityStore],
    key: str,
    serializer: Callable[[SQLModel], dict] = serialize,
) -> APIRouter:
    #clients, tasks and payments share one lifecycle, so they share these routes. key is the name the entity is returned under, e.g. "client"
    router = APIRouter(prefix=f"/{key}s", tags=[f"{entity_type.name}s"])

    @router.get("/", status_code=200) #GET endpoint listing entities in insertion order, optionally filtered by status
    def list_entities(status: str | None = None, store: EntityStore = Depends(get_store)):
        try:
            entities = store.list(status=status)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return {f"{key}s": [serializer(entity) for entity in entities]}

    @router.get("/form", status_code=200) #empty form for creating a new entity
    def open_create_form(store: EntityStore = Depends(get_store)):
        return {"editing": False, "values": FormFlow(store).open()}

    @router.get("/{entity_id}/form", status_code=200) #form prefilled with an existing entity
    def open_edit_form(entity_id: str, store: EntityStore = Depends(get_store)):
        try:
            values = FormFlow(store).open(entity_id)
        except EntityNotFoundError:
            raise not_found(entity_type)
        return {"editing": True, "values": values}

    @router.post("/", status_code=201)
    def create_entity(raw_input: dict[str, Any] = Body(...), store: EntityStore = Depends(get_store)):
        form = FormFlow(store)
        form.open()
        result = form.submit(raw_input)
        if not result.ok:
            raise HTTPException(
                status_code=422,
                detail=[{"field": error.field, "message": error.message} for error in result.errors],
            )
        return {"message": result.message, key: serializer(result.entity)}

    @router.get("/{entity_id}", status_code=200)
    def get_entity(entity_id: str, store: EntityStore = Depends(get_store)):
        try:
            return {key: serializer(store.get(entity_id))}
        except EntityNotFoundError:
            raise not_found(entity_type)

    @router.put("/{entity_id}", status_code=200) #submit of the edit form
    def update_entity(
        entity_id: str,
        raw_input: dict[str, Any] = Body(...),
        expected_revision: int | None = None,
        store: EntityStore = Depends(get_store),
    ):
        form = FormFlow(store)
        try:
            form.open(entity_id)
            result = form.submit(raw_input, expected_revision=expected_revision)
        except EntityNotFoundError:
            raise not_found(entity_type)
        except RevisionConflictError as e:
            raise HTTPException(status_code=409, detail=str(e))
        if not result.ok:
            raise HTTPException(
                status_code=422,
                detail=[{"field": error.field, "message": error.message} for error in result.errors],
            )
        return {"message": result.message, key: serializer(result.entity)}

    @router.patch("/{entity_id}/status", status_code=200)
    def change_status(entity_id: str, change: StatusChange, store: EntityStore = Depends(get_store)):
        try:
            entity = store.set_status(entity_id, change.status)
        except EntityNotFoundError:
            raise not_found(entity_type)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return {
            "message": STATUS_UPDATED_MESSAGE.format(entity=entity_type.name, status=entity.status.value),
            key: serializer(entity),
        }

    @router.delete("/{entity_id}", status_code=200)
    def delete_entity(entity_id: str, store: EntityStore = Depends(get_store)):
        try:
            store.delete(entity_id)
        except EntityNotFoundError:
            raise not_found(entity_type)
        return {"message": DELETED_MESSAGE.format(entity=entity_type.name)}

    return router
