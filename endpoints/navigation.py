from fastapi import APIRouter, Depends
from dependencies import Stores, get_current_session, get_stores
from logic.dashboard import dashboard_summary
from logic.navigation import navigation_items
from logic.session import UserSession

router = APIRouter(tags=["Navigation"])

@router.get("/navigation", status_code=200) #sidebar entries for the logged in user
def get_navigation(session: UserSession = Depends(get_current_session)):
    return {"items": navigation_items(session)}

@router.get("/dashboard/summary", status_code=200) #stat cards and status distributions
def get_dashboard_summary(stores: Stores = Depends(get_stores)):
    return dashboard_summary(stores.clients, stores.tasks, stores.payments)
