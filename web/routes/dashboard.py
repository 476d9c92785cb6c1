from __future__ import annotations

from fastapi import APIRouter, Depends

from stockroom.models.dashboard import DashboardMetrics
from stockroom.services.dashboard_service import DashboardService
from web.deps import get_dashboard_service

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardMetrics)
async def dashboard(service: DashboardService = Depends(get_dashboard_service)):
    return service.metrics()
