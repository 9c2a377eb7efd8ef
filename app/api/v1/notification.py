from fastapi import APIRouter

from app.api.v1.schemas import GenerateNotificationRequest, GenerateNotificationResponse
from app.core.logging import get_logger
from app.domain.notification.service import generate_notification

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = get_logger(__name__)


@router.post("/generate", response_model=GenerateNotificationResponse)
async def generate(request: GenerateNotificationRequest) -> GenerateNotificationResponse:
    logger.info(
        "알림 생성 요청 repo=%s provider=%s commits=%d hide_links=%s",
        request.repository.full_name,
        request.provider,
        len(request.commits),
        request.hide_links,
    )

    result = await generate_notification(
        commits=request.commits,
        provider=request.provider,
        api_key=request.api_key,
        repository=request.repository,
        diff=request.diff,
        compare_url=request.compare_url,
        hide_links=request.hide_links,
    )

    return GenerateNotificationResponse(message=result.message, embed=result.embed.to_payload())
