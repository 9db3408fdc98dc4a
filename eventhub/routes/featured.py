from fastapi import APIRouter

from eventhub.core.constants import FEATURED_EVENTS
from eventhub.schemas.events import FeaturedEvent

router = APIRouter(prefix="/featured", tags=["featured"])


@router.get("", response_model=list[FeaturedEvent])
def featured_events():
    """Static demo list for the featured section."""
    return FEATURED_EVENTS
