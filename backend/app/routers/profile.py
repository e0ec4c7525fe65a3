"""
Profile endpoints.

Translates HTTP requests into orchestrator calls and renders the returned
outcome. No decision logic lives here.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from profile_service.logging import get_logger
from profile_service.outcomes import (
    Conflict,
    Created,
    Found,
    NotFound,
    StorageFailure,
    Updated,
)
from profile_service.services import ProfileOrchestrator

from ..dependencies import get_profile_orchestrator
from ..schemas import ErrorResponse, ProfileSchema, PutProfileRequestSchema

logger = get_logger("profile")

router = APIRouter(prefix="/Profile", tags=["profile"])

STORAGE_UNAVAILABLE_DETAIL = "Profile storage unavailable. Try again later."


def _not_found(username: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"A User with username {username} was not found",
    )


def _storage_unavailable(outcome: StorageFailure) -> HTTPException:
    # Details stay in the server log
    logger.error(
        "profile_request_storage_failure",
        username=outcome.username,
        operation=outcome.operation,
        error=str(outcome.error),
    )
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=STORAGE_UNAVAILABLE_DETAIL,
    )


@router.get(
    "/{username}",
    response_model=ProfileSchema,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def get_profile(
    username: str,
    orchestrator: ProfileOrchestrator = Depends(get_profile_orchestrator),
):
    """Get a profile by username."""
    outcome = orchestrator.fetch_profile(username)

    if isinstance(outcome, Found):
        return ProfileSchema.from_entity(outcome.profile)
    if isinstance(outcome, NotFound):
        raise _not_found(outcome.username)
    raise _storage_unavailable(outcome)


@router.post(
    "",
    response_model=ProfileSchema,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def add_profile(
    payload: ProfileSchema,
    request: Request,
    response: Response,
    orchestrator: ProfileOrchestrator = Depends(get_profile_orchestrator),
):
    """Create a new profile. Rejected with 409 if the username is taken."""
    outcome = orchestrator.create_profile(payload.to_entity())

    if isinstance(outcome, Created):
        response.headers["Location"] = str(
            request.url_for("get_profile", username=outcome.profile.username)
        )
        return ProfileSchema.from_entity(outcome.profile)
    if isinstance(outcome, Conflict):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"A user with username {outcome.username} already exists",
        )
    raise _storage_unavailable(outcome)


@router.put(
    "/{username}",
    response_model=ProfileSchema,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def update_profile(
    username: str,
    payload: PutProfileRequestSchema,
    orchestrator: ProfileOrchestrator = Depends(get_profile_orchestrator),
):
    """
    Replace the first and last name of an existing profile.

    The username is taken from the path; the body only carries names.
    """
    outcome = orchestrator.update_profile(username, payload.to_entity())

    if isinstance(outcome, Updated):
        return ProfileSchema.from_entity(outcome.profile)
    if isinstance(outcome, NotFound):
        raise _not_found(outcome.username)
    raise _storage_unavailable(outcome)
