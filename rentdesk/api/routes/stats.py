from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rentdesk.database import get_db
from rentdesk.schemas.stats import DashboardStats
from rentdesk.services.stats_service import get_dashboard_stats

router = APIRouter()


@router.get("", response_model=DashboardStats)
def read_stats(db: Session = Depends(get_db)):
    """Property count, occupancy rate, revenue and open maintenance count"""
    return get_dashboard_stats(db)
