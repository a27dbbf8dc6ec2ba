"""
Photographers router: account CRUD and login.
"""
import time
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from snapshare.database import get_db
from snapshare.exceptions import InvalidCredentialsError, NotFoundError
from snapshare.schemas.common import (
    CreatedResponse,
    DeletedResponse,
    ErrorResponse,
    MessageResponse,
    PathId,
    UpdatedResponse,
)
from snapshare.schemas.photographer import (
    LoginResponse,
    PhotographerCreate,
    PhotographerLogin,
    PhotographerResponse,
    PhotographerSummary,
    PhotographerUpdate,
)
from snapshare.services.auth import AuthService
from snapshare.services.photographer import PhotographerService
from snapshare.utils.logger import log_info
from snapshare.utils.prometheus_metrics import (
    login_duration_seconds,
    login_total,
    record_operation,
)

router = APIRouter(prefix="/photographers", tags=["Photographers"])

NOT_FOUND_MESSAGE = "Photographer not found"

_errors = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new photographer",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def create_photographer(
    data: PhotographerCreate,
    db: AsyncSession = Depends(get_db),
) -> CreatedResponse:
    """
    Create a photographer account.

    - **email**: must not be registered yet (duplicate → 500 with the
      storage error message)
    - **password**: stored as a salted hash
    """
    try:
        photographer_id = await PhotographerService(db).create_photographer(data)
    except Exception:
        record_operation("photographer", "create", "failure")
        raise
    record_operation("photographer", "create")
    return CreatedResponse(id=photographer_id)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Photographer login",
    responses={
        status.HTTP_401_UNAUTHORIZED: {"model": MessageResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def login(
    login_data: PhotographerLogin,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """
    Check email and password.

    Returns id, name and email of the photographer. No token is issued.
    Unknown email and wrong password both answer 401.
    """
    start = time.perf_counter()
    photographer = await AuthService(db).authenticate(login_data.email, login_data.password)
    result = "success" if photographer else "failure"
    login_duration_seconds.labels(result=result).observe(time.perf_counter() - start)
    login_total.labels(result=result).inc()

    if not photographer:
        raise InvalidCredentialsError()

    log_info("Photographer login successful", event="photographer_login")
    return LoginResponse(
        message="Login successful.",
        photographer=PhotographerSummary.model_validate(photographer),
    )


@router.get(
    "",
    response_model=List[PhotographerResponse],
    summary="Get all photographers",
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def list_photographers(
    db: AsyncSession = Depends(get_db),
) -> List[PhotographerResponse]:
    photographers = await PhotographerService(db).list_photographers()
    return [PhotographerResponse.model_validate(p) for p in photographers]


@router.get(
    "/{photographer_id}",
    response_model=PhotographerResponse,
    summary="Get a photographer by ID",
    responses=_errors,
)
async def get_photographer(
    photographer_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> PhotographerResponse:
    photographer = await PhotographerService(db).get_photographer_by_id(photographer_id)
    if not photographer:
        raise NotFoundError(NOT_FOUND_MESSAGE, "photographer", photographer_id)
    return PhotographerResponse.model_validate(photographer)


@router.put(
    "/{photographer_id}",
    response_model=UpdatedResponse,
    summary="Update a photographer by ID",
    responses=_errors,
)
async def update_photographer(
    photographer_id: PathId,
    data: PhotographerUpdate,
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    """
    Replace every field of a photographer. Never creates a row.
    """
    updated = await PhotographerService(db).update_photographer(photographer_id, data)
    if updated == 0:
        record_operation("photographer", "update", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "photographer", photographer_id)
    record_operation("photographer", "update")
    return UpdatedResponse(updated=updated)


@router.delete(
    "/{photographer_id}",
    response_model=DeletedResponse,
    summary="Delete a photographer by ID",
    responses=_errors,
)
async def delete_photographer(
    photographer_id: PathId,
    db: AsyncSession = Depends(get_db),
) -> DeletedResponse:
    """
    Delete a photographer. Its folders are kept.
    """
    deleted = await PhotographerService(db).delete_photographer(photographer_id)
    if deleted == 0:
        record_operation("photographer", "delete", "not_found")
        raise NotFoundError(NOT_FOUND_MESSAGE, "photographer", photographer_id)
    record_operation("photographer", "delete")
    return DeletedResponse(deleted=deleted)
