from constants import PENDING_PAYMENT_STATUSES
from enums import TaskStatusEnum, PaymentStatusEnum
from logic.store import EntityStore

def dashboard_summary(clients: EntityStore, tasks: EntityStore, payments: EntityStore) -> dict:
    client_counts = clients.count_by_status()
    task_counts = tasks.count_by_status()
    payment_counts = payments.count_by_status()

    completed_tasks = task_counts[TaskStatusEnum.complete.value]
    return {
        "stats": {
            "total_clients": sum(client_counts.values()),
            "active_tasks": sum(task_counts.values()) - completed_tasks, #anything not complete is still being worked on
            "pending_payments": sum(payment_counts[status.value] for status in PENDING_PAYMENT_STATUSES),
            "completed_tasks": completed_tasks,
            "overdue_payments": payment_counts[PaymentStatusEnum.overdue.value],
        },
        "client_status": client_counts,
        "task_status": task_counts,
        "payment_status": payment_counts,
    }
