import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any
from sqlmodel import SQLModel
from constants import SAVED_MESSAGES
from logic.store import EntityStore
from logic.validation import FieldError, validate

logger = logging.getLogger(__name__)

@dataclass
class FormResult:
    ok: bool
    entity: SQLModel | None = None
    errors: list[FieldError] = field(default_factory=list)
    message: str | None = None #toast text on success

class FormFlow: #open / submit / cancel cycle for one entity. Editing or creating depends only on the id given to open
    def __init__(self, store: EntityStore):
        self.store = store
        self.editing_id: str | None = None
        self.is_open = False

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def open(self, existing_id: str | None = None) -> dict[str, Any]:
        if existing_id is None:
            values = self.create_defaults()
        else:
            entity = self.store.get(existing_id) #raises EntityNotFoundError for unknown ids
            values = {name: getattr(entity, name) for name in self.store.entity_type.schema.model_fields}
        self.editing_id = existing_id
        self.is_open = True
        return values

    def create_defaults(self) -> dict[str, Any]:
        values = {}
        for name, field_info in self.store.entity_type.schema.model_fields.items():
            if not field_info.is_required():
                values[name] = field_info.get_default(call_default_factory=True)
            elif field_info.annotation is str:
                values[name] = ""
            elif field_info.annotation is float:
                values[name] = 0
            elif field_info.annotation is date:
                values[name] = self.store.clock().date() #due dates start at today
            else:
                values[name] = None
        return values

    def submit(self, raw_input: dict[str, Any], expected_revision: int | None = None) -> FormResult:
        if not self.is_open:
            raise RuntimeError("Form must be opened before it is submitted")

        result = validate(self.store.entity_type.schema, raw_input)
        if not result.ok:
            logger.debug("%s form rejected: %s", self.store.name, [error.field for error in result.errors])
            return FormResult(ok=False, errors=result.errors)

        if self.is_editing:
            entity = self.store.update(
                self.editing_id,
                result.data.model_dump(exclude_unset=True), #fields left out of the submit keep their stored value
                expected_revision=expected_revision,
            )
        else:
            entity = self.store.create(result.data.model_dump())

        message = self.success_message()
        self._close()
        return FormResult(ok=True, entity=entity, message=message)

    def cancel(self) -> None:
        self._close() #nothing was written, so there is nothing to undo

    def success_message(self) -> str:
        added, updated = SAVED_MESSAGES.get(
            self.store.name, (f"{self.store.name} added successfully", f"{self.store.name} updated successfully")
        )
        return updated if self.is_editing else added

    def _close(self) -> None:
        self.editing_id = None
        self.is_open = False
