from enums import ClientStatusEnum, TaskStatusEnum, PaymentStatusEnum, UserRoleEnum

SESSION_STORAGE_KEY = "anthem_user" #fixed key the logged in user record is persisted under

DEMO_USERS = [ #stand-in user directory, any password is accepted for these accounts
    {
        "id": "1",
        "email": "admin@antheminfotech.com",
        "name": "Admin User",
        "role": UserRoleEnum.admin,
    },
    {
        "id": "2",
        "email": "client@example.com",
        "name": "Client User",
        "role": UserRoleEnum.client,
        "client_id": "1",
    },
]

SAVED_MESSAGES = { #toast text shown after a form submit, keyed by (create, update)
    "Client": ("Client added successfully", "Client updated successfully"),
    "Task": ("Task added successfully", "Task updated successfully"),
    "Payment": ("Payment added successfully", "Payment updated successfully"),
}

STATUS_UPDATED_MESSAGE = "{entity} status updated to {status}"
DELETED_MESSAGE = "{entity} deleted successfully"
NOT_FOUND_MESSAGE = "{entity} not found"
ACCOUNT_CREATED_MESSAGE = "Account credentials sent to {email}"
CREDENTIALS_RESENT_MESSAGE = "Credentials resent to {email}"

DEFAULT_BADGE = "bg-gray-100 text-gray-800 hover:bg-gray-200"

STATUS_BADGE_COLORS = { #badge classes per status value
    ClientStatusEnum.active: "bg-green-100 text-green-800 hover:bg-green-200",
    ClientStatusEnum.idle: "bg-amber-100 text-amber-800 hover:bg-amber-200",
    ClientStatusEnum.gone: "bg-red-100 text-red-800 hover:bg-red-200",
    TaskStatusEnum.requirements: "bg-slate-100 text-slate-800 hover:bg-slate-200",
    TaskStatusEnum.quote: "bg-blue-100 text-blue-800 hover:bg-blue-200",
    TaskStatusEnum.approved: "bg-indigo-100 text-indigo-800 hover:bg-indigo-200",
    TaskStatusEnum.progress: "bg-amber-100 text-amber-800 hover:bg-amber-200",
    TaskStatusEnum.submitted: "bg-purple-100 text-purple-800 hover:bg-purple-200",
    TaskStatusEnum.feedback: "bg-orange-100 text-orange-800 hover:bg-orange-200",
    TaskStatusEnum.complete: "bg-green-100 text-green-800 hover:bg-green-200",
    PaymentStatusEnum.received: "bg-green-100 text-green-800 hover:bg-green-200",
    PaymentStatusEnum.due: "bg-blue-100 text-blue-800 hover:bg-blue-200",
    PaymentStatusEnum.invoiced: "bg-purple-100 text-purple-800 hover:bg-purple-200",
    PaymentStatusEnum.pending: "bg-amber-100 text-amber-800 hover:bg-amber-200",
    PaymentStatusEnum.overdue: "bg-red-100 text-red-800 hover:bg-red-200",
    PaymentStatusEnum.canceled: DEFAULT_BADGE,
}

STATUS_ROW_ACCENTS = { #left border accent for table rows
    ClientStatusEnum.active: "border-l-4 border-l-green-500",
    ClientStatusEnum.idle: "border-l-4 border-l-amber-500",
    ClientStatusEnum.gone: "border-l-4 border-l-red-500",
    TaskStatusEnum.requirements: "border-l-4 border-l-slate-500",
    TaskStatusEnum.quote: "border-l-4 border-l-blue-500",
    TaskStatusEnum.approved: "border-l-4 border-l-indigo-500",
    TaskStatusEnum.progress: "border-l-4 border-l-amber-500",
    TaskStatusEnum.submitted: "border-l-4 border-l-purple-500",
    TaskStatusEnum.feedback: "border-l-4 border-l-orange-500",
    TaskStatusEnum.complete: "border-l-4 border-l-green-500",
    PaymentStatusEnum.received: "border-l-4 border-l-green-500",
    PaymentStatusEnum.due: "border-l-4 border-l-blue-500",
    PaymentStatusEnum.invoiced: "border-l-4 border-l-purple-500",
    PaymentStatusEnum.pending: "border-l-4 border-l-amber-500",
    PaymentStatusEnum.overdue: "border-l-4 border-l-red-500",
    PaymentStatusEnum.canceled: "border-l-4 border-l-gray-500",
}

NAVIGATION_ENTRIES = [ #(label, path, admin only)
    ("Dashboard", "/dashboard", False),
    ("Clients", "/clients", True),
    ("Tasks", "/tasks", False),
    ("Payments", "/payments", False),
    ("Notifications", "/notifications", False),
    ("Settings", "/settings", False),
]

PENDING_PAYMENT_STATUSES = [PaymentStatusEnum.due, PaymentStatusEnum.invoiced, PaymentStatusEnum.pending]
