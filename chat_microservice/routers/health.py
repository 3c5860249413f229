from fastapi import APIRouter, Depends

from ..config import get_settings
from ..dependencies import get_chat_service
from ..logger import get_logger
from ..models.session import utcnow
from ..schemas import HealthMetrics, HealthResponse
from ..services.chat_service import ChatService


logger = get_logger(__name__)
settings = get_settings()

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(service: ChatService = Depends(get_chat_service)):
    logger.debug("Health check requested")
    report = HealthResponse(
        status="UP",
        timestamp=utcnow(),
        service=settings.app_name,
        version=settings.app_version,
        metrics=HealthMetrics(active_sessions=service.get_session_count()),
    )
    logger.debug("Health check completed successfully")
    return report
