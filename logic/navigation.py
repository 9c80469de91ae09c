from constants import NAVIGATION_ENTRIES
from logic.session import UserSession

def navigation_items(session: UserSession | None) -> list[dict]:
    is_admin = session is not None and session.is_admin
    return [
        {"label": label, "path": path}
        for label, path, admin_only in NAVIGATION_ENTRIES
        if is_admin or not admin_only #Clients is only listed for admins, everything else always shows
    ]
