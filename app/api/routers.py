from fastapi import APIRouter

from app.api.v1.notification import router as notification_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(notification_router)
