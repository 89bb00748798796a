"""Dashboard API endpoint.

GET /api/dashboard - Goal and solution summary
"""

from fastapi import APIRouter, Depends

from impactmap.api.deps import get_repository
from impactmap.db.repository import InMemoryRepository
from impactmap.schemas.dashboard import DashboardResponse
from impactmap.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    repository: InMemoryRepository = Depends(get_repository),
) -> DashboardResponse:
    """Goal counts (total, live, per status), solution count and average goal progress."""
    return DashboardService(repository).get_dashboard()
