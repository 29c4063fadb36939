# routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import CurrentUser, get_current_user
from schemas.dashboard import DashboardStats
from services.dashboard_service import compute_dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     """Income, expenses, arrears and occupancy for the current month."""
     return compute_dashboard_stats(db, current.owner_id)
