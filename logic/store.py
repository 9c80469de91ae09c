import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Generic, TypeVar
from sqlmodel import SQLModel
from database.models import FormSchema, utc_now
from database.repository import Repository, InMemoryRepository
from logic.errors import EntityNotFoundError, EntityValidationError, RevisionConflictError
from logic.status import apply_status_side_effects, coerce_status
from logic.validation import validate

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=SQLModel)

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at", "revision"}) #only the store writes these

@dataclass(frozen=True)
class EntityType(Generic[EntityT]): #describes one kind of entity so a single store class serves all of them
    name: str
    model: type[EntityT]
    schema: type[FormSchema]
    status_enum: type[Enum] | None = None

    @property
    def field_names(self) -> set[str]:
        return set(self.model.model_fields)

Listener = Callable[[list], None]

class EntityStore(Generic[EntityT]): #ordered collection of one entity type, keyed by id. Every mutation stamps updated_at, bumps revision and notifies listeners
    def __init__(
        self,
        entity_type: EntityType[EntityT],
        repository: Repository[EntityT] | None = None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self.entity_type = entity_type
        self.repository = repository if repository is not None else InMemoryRepository()
        self.clock = clock
        self.id_factory = id_factory
        self._listeners: list[Listener] = []

    @property
    def name(self) -> str:
        return self.entity_type.name

    def create(self, values: dict[str, Any]) -> EntityT:
        self._check_fields(values)
        values = {**values, **self._validated(values)}
        now = self.clock()
        entity = self.entity_type.model(
            **values,
            id=self._new_id(),
            created_at=now,
            updated_at=now,
            revision=1,
        )
        if self.entity_type.status_enum is not None:
            entity.status = coerce_status(self.entity_type.status_enum, entity.status)
            apply_status_side_effects(entity, now) #e.g. a task entered as already complete
        self.repository.add(entity)
        logger.info("Created %s %s", self.name, entity.id)
        self._notify()
        return entity

    def get(self, entity_id: str) -> EntityT:
        entity = self.repository.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.name, entity_id)
        return entity

    def exists(self, entity_id: str) -> bool:
        return entity_id in self.repository

    def update(self, entity_id: str, patch: dict[str, Any], expected_revision: int | None = None) -> EntityT:
        self._check_fields(patch)
        entity = self.get(entity_id)
        if expected_revision is not None and expected_revision != entity.revision:
            raise RevisionConflictError(self.name, entity_id, expected_revision, entity.revision)
        current = {name: getattr(entity, name) for name in self.entity_type.schema.model_fields}
        validated = self._validated({**current, **patch})
        patch = {name: validated.get(name, value) for name, value in patch.items()} #normalised values, e.g. stripped text

        previous_status = getattr(entity, "status", None)
        for field_name, value in patch.items():
            setattr(entity, field_name, value)

        now = self.clock()
        if self.entity_type.status_enum is not None:
            entity.status = coerce_status(self.entity_type.status_enum, entity.status)
            if entity.status != previous_status:
                apply_status_side_effects(entity, now)
        self._commit(entity, now)
        logger.info("Updated %s %s (%s)", self.name, entity_id, ", ".join(sorted(patch)) or "no fields")
        return entity

    def set_status(self, entity_id: str, new_status) -> EntityT:
        if self.entity_type.status_enum is None:
            raise TypeError(f"{self.name} has no status field")
        status = coerce_status(self.entity_type.status_enum, new_status)
        entity = self.get(entity_id)
        now = self.clock()
        entity.status = status
        stamped = apply_status_side_effects(entity, now)
        self._commit(entity, now)
        logger.info("%s %s status set to %s", self.name, entity_id, status.value)
        if stamped:
            logger.debug("Stamped %s on %s %s", ", ".join(stamped), self.name, entity_id)
        return entity

    def delete(self, entity_id: str) -> None:
        if not self.repository.remove(entity_id):
            raise EntityNotFoundError(self.name, entity_id)
        logger.info("Deleted %s %s", self.name, entity_id)
        self._notify()

    def list(self, status=None) -> list[EntityT]:
        entities = self.repository.all()
        if status is None:
            return entities
        status = coerce_status(self.entity_type.status_enum, status)
        return [entity for entity in entities if entity.status == status]

    def count_by_status(self) -> dict[str, int]:
        if self.entity_type.status_enum is None:
            return {}
        counts = {member.value: 0 for member in self.entity_type.status_enum} #every status shows up, even at zero
        for entity in self.repository.all():
            counts[entity.status.value] += 1
        return counts

    def count(self) -> int:
        return len(self.repository.ids())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for new snapshots; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, entity: EntityT, now: datetime) -> None:
        entity.updated_at = now
        entity.revision += 1
        self.repository.save(entity)
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.repository.all()
        for listener in list(self._listeners):
            listener(snapshot)

    def _new_id(self) -> str:
        existing_ids = self.repository.ids()
        new_id = self.id_factory()
        while new_id in existing_ids: #only a custom id_factory could realistically collide
            new_id = self.id_factory()
        return new_id

    def _validated(self, values: dict[str, Any]) -> dict[str, Any]:
        schema = self.entity_type.schema
        result = validate(schema, {name: value for name, value in values.items() if name in schema.model_fields})
        if not result.ok:
            logger.debug("Rejected %s write: %s", self.name, [error.field for error in result.errors])
            raise EntityValidationError(self.name, result.errors)
        return result.data.model_dump()

    def _check_fields(self, values: dict[str, Any]) -> None:
        protected = PROTECTED_FIELDS.intersection(values)
        if protected:
            raise ValueError(f"Cannot set {', '.join(sorted(protected))} on {self.name}")
        unknown = set(values) - self.entity_type.field_names
        if unknown:
            raise ValueError(f"Unknown {self.name} fields: {', '.join(sorted(unknown))}")
