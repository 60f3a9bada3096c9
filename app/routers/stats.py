from fastapi import APIRouter, Depends

from app.schemas.site import StatsResponse
from app.security import get_backend_token

router = APIRouter()

DEMO_STATS = StatsResponse(
    totalPosts=4,
    totalSubscribers=127,
    monthlyRevenue=3420,
    activeUsers=89,
)


@router.get(
    "/stats",
    response_model=StatsResponse,
    dependencies=[Depends(get_backend_token)],
)
def get_stats():
    return DEMO_STATS
