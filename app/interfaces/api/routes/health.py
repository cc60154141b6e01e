from fastapi import APIRouter, Depends

from app.infrastructure.notifications import Notifier
from app.interfaces.api.dependencies import get_notifier
from app.interfaces.api.schemas import HealthRead

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthRead)
def health_check(notifier: Notifier = Depends(get_notifier)) -> HealthRead:
    return HealthRead(status="ok", transport=notifier.name)
