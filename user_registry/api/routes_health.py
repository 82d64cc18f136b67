# File: user_registry/api/routes_health.py

from fastapi import APIRouter, Depends

from user_registry.api.deps import get_user_service
from user_registry.services.user_service import UserService

router = APIRouter(tags=["health"])


@router.get("/healthz", summary="Liveness plus database reachability")
def health_check(service: UserService = Depends(get_user_service)):
    return {
        "status": "ok",
        "database": "connected" if service.ping() else "disconnected",
    }
