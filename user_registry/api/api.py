from fastapi import APIRouter

from user_registry.api.routes_auth import router as auth_router
from user_registry.api.routes_health import router as health_router
from user_registry.api.routes_metrics import router as metrics_router


api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(metrics_router)
api_router.include_router(health_router)
