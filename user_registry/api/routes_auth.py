# File: user_registry/api/routes_auth.py

"""
Registration and login routes.

Both return the same envelope ({message, name, email, status}) and have three
outcomes: success (200), an expected failure (400) and a database failure
(500, logged, no internal detail).
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_registry.api.deps import get_user_service
from user_registry.core.errors import ConnectionFailure, QueryFailure
from user_registry.core.metrics import LOGIN_REQUESTS, REGISTER_REQUESTS
from user_registry.schemas.user import ApiResponse, LoginRequest, RegisterRequest
from user_registry.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

ENVELOPE_RESPONSES = {
    400: {"model": ApiResponse},
    500: {"model": ApiResponse},
}


def envelope(
    status_code: int,
    message: str,
    *,
    name: Optional[str],
    email: Optional[str],
) -> JSONResponse:
    body = ApiResponse(
        message=message,
        name=name,
        email=email,
        status="success" if status_code == status.HTTP_200_OK else "error",
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post(
    "/register",
    response_model=ApiResponse,
    responses=ENVELOPE_RESPONSES,
    summary="Register a user",
)
def register_user(
    payload: RegisterRequest,
    service: UserService = Depends(get_user_service),
):
    REGISTER_REQUESTS.inc()

    try:
        with service.connect() as connection:
            existing = service.find_by_email(connection, payload.email)
            if existing is not None:
                logger.info("User already exists: %s, %s", existing.name, existing.email)
                return envelope(
                    status.HTTP_400_BAD_REQUEST,
                    "User already exists",
                    name=existing.name,
                    email=existing.email,
                )

            created = service.create(connection, name=payload.name, email=payload.email)
    except ConnectionFailure as exc:
        logger.error("Error connecting to database: %s", exc)
        return envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to connect to database",
            name=None,
            email=payload.email,
        )
    except QueryFailure as exc:
        logger.error("Error registering user %s: %s", payload.email, exc)
        return envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to register user",
            name=None,
            email=payload.email,
        )

    logger.info("User registered successfully: %s", created.email)
    return envelope(
        status.HTTP_200_OK,
        "Registration successful",
        name=created.name,
        email=created.email,
    )


@router.post(
    "/login",
    response_model=ApiResponse,
    responses=ENVELOPE_RESPONSES,
    summary="Look a user up by email",
)
def login_user(
    payload: LoginRequest,
    service: UserService = Depends(get_user_service),
):
    LOGIN_REQUESTS.inc()

    try:
        with service.connect() as connection:
            user = service.find_by_email(connection, payload.email)
    except ConnectionFailure as exc:
        logger.error("Error connecting to database: %s", exc)
        return envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to connect to database",
            name=None,
            email=payload.email,
        )
    except QueryFailure as exc:
        logger.error("Error querying user %s: %s", payload.email, exc)
        return envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to query user",
            name=None,
            email=payload.email,
        )

    if user is None:
        logger.info("User not found: %s", payload.email)
        return envelope(
            status.HTTP_400_BAD_REQUEST,
            "User does not exist",
            name=None,
            email=payload.email,
        )

    logger.info("User found: %s", user.email)
    return envelope(
        status.HTTP_200_OK,
        "Login successful",
        name=user.name,
        email=user.email,
    )
