# File: user_registry/api/deps.py

from user_registry.db.session import get_engine
from user_registry.services.user_service import UserService


def get_user_service() -> UserService:
    """
    FastAPI dependency that provides the user service.

    The engine is resolved lazily inside the service so a missing or
    unreachable database surfaces as a handled error, not a dependency crash.

    Usage in route functions:
        service: UserService = Depends(get_user_service)
    """
    return UserService(get_engine)
