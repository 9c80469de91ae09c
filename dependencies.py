from dataclasses import dataclass
from functools import lru_cache
from fastapi import Depends, HTTPException
from config import STORE_BACKEND, SESSION_FILE, SIMULATED_LATENCY
from database.database import engine
from database.repository import InMemoryRepository, Repository, SQLModelRepository
from enums import StoreBackendEnum
from logic.entity_types import CLIENT, TASK, PAYMENT, NOTIFICATION
from logic.notifications import NotificationService
from logic.session import AuthService, SessionStorage, UserSession
from logic.store import EntityStore, EntityType

@dataclass
class Stores:
    clients: EntityStore
    tasks: EntityStore
    payments: EntityStore
    notifications: EntityStore

def make_repository(entity_type: EntityType, backend: StoreBackendEnum = STORE_BACKEND) -> Repository:
    if backend == StoreBackendEnum.sql:
        return SQLModelRepository(entity_type.model, engine)
    return InMemoryRepository()

def build_stores(backend: StoreBackendEnum = STORE_BACKEND) -> Stores:
    return Stores(
        clients=EntityStore(CLIENT, make_repository(CLIENT, backend)),
        tasks=EntityStore(TASK, make_repository(TASK, backend)),
        payments=EntityStore(PAYMENT, make_repository(PAYMENT, backend)),
        notifications=EntityStore(NOTIFICATION, make_repository(NOTIFICATION, backend)),
    )

@lru_cache #one set of stores per process, tests swap it out through app.dependency_overrides
def get_stores() -> Stores:
    return build_stores()

def get_client_store(stores: Stores = Depends(get_stores)) -> EntityStore:
    return stores.clients

def get_task_store(stores: Stores = Depends(get_stores)) -> EntityStore:
    return stores.tasks

def get_payment_store(stores: Stores = Depends(get_stores)) -> EntityStore:
    return stores.payments

def get_notification_service(stores: Stores = Depends(get_stores)) -> NotificationService:
    return NotificationService(stores.notifications)

@lru_cache
def get_auth_service() -> AuthService:
    return AuthService(SessionStorage(SESSION_FILE), latency=SIMULATED_LATENCY)

def get_optional_session(auth: AuthService = Depends(get_auth_service)) -> UserSession | None:
    return auth.restore()

def get_current_session(session: UserSession | None = Depends(get_optional_session)) -> UserSession:
    if session is None:
        raise HTTPException(status_code=401, detail="Not logged in")
    return session
