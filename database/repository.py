import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from sqlmodel import SQLModel, Session, select

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=SQLModel)


class Repository(ABC, Generic[EntityT]): #persistence seam for one entity type, returned entities are detached copies that only land through save
    @abstractmethod
    def add(self, entity: EntityT) -> None: ...

    @abstractmethod
    def get(self, entity_id: str) -> EntityT | None: ...

    @abstractmethod
    def save(self, entity: EntityT) -> None: ...

    @abstractmethod
    def remove(self, entity_id: str) -> bool: ...

    @abstractmethod
    def all(self) -> list[EntityT]: ...

    def ids(self) -> set[str]:
        return {entity.id for entity in self.all()}

    def __contains__(self, entity_id: str) -> bool:
        return self.get(entity_id) is not None


def copy_entity(entity: EntityT) -> EntityT:
    return type(entity).model_validate(entity.model_dump())


class InMemoryRepository(Repository[EntityT]):
    def __init__(self) -> None:
        self._entities: dict[str, EntityT] = {} #dicts keep insertion order, which is the list order

    def add(self, entity: EntityT) -> None:
        if entity.id in self._entities:
            raise ValueError(f"Duplicate id {entity.id}")
        self._entities[entity.id] = copy_entity(entity)

    def get(self, entity_id: str) -> EntityT | None:
        entity = self._entities.get(entity_id)
        return copy_entity(entity) if entity is not None else None

    def save(self, entity: EntityT) -> None:
        if entity.id not in self._entities:
            raise KeyError(entity.id)
        self._entities[entity.id] = copy_entity(entity) #replacing keeps the entry's position in the dict

    def remove(self, entity_id: str) -> bool:
        return self._entities.pop(entity_id, None) is not None

    def all(self) -> list[EntityT]:
        return [copy_entity(entity) for entity in self._entities.values()]

    def ids(self) -> set[str]:
        return set(self._entities)


class SQLModelRepository(Repository[EntityT]):
    def __init__(self, model: type[EntityT], engine) -> None:
        self.model = model
        self.engine = engine

    def add(self, entity: EntityT) -> None:
        with Session(self.engine) as session:
            session.add(copy_entity(entity))
            session.commit()
        logger.debug("Inserted %s %s", self.model.__name__, entity.id)

    def get(self, entity_id: str) -> EntityT | None:
        with Session(self.engine) as session:
            entity = session.get(self.model, entity_id)
            return copy_entity(entity) if entity is not None else None

    def save(self, entity: EntityT) -> None:
        with Session(self.engine) as session:
            if session.get(self.model, entity.id) is None:
                raise KeyError(entity.id)
            session.merge(copy_entity(entity)) #merge copies the detached values onto the row loaded above
            session.commit()

    def remove(self, entity_id: str) -> bool:
        with Session(self.engine) as session:
            entity = session.get(self.model, entity_id)
            if entity is None:
                return False
            session.delete(entity)
            session.commit()
            return True

    def all(self) -> list[EntityT]:
        with Session(self.engine) as session:
            entities = session.exec(select(self.model).order_by(self.model.created_at)).all() #insertion order
            return [copy_entity(entity) for entity in entities]
