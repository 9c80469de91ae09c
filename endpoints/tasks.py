from dependencies import get_task_store
from endpoints.entities import build_entity_router
from logic.entity_types import TASK

router = build_entity_router(TASK, get_task_store, key="task")
