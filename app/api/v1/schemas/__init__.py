from app.api.v1.schemas.notification import (
    GenerateNotificationRequest,
    GenerateNotificationResponse,
)

__all__ = [
    "GenerateNotificationRequest",
    "GenerateNotificationResponse",
]
