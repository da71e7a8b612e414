import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.dependencies.auth import get_current_user
from catalog.api.dependencies.database import get_db
from catalog.api.responses import error_message, error_response, success_response
from catalog.core.exceptions import (
    BrandAlreadyExistsError,
    BrandInUseError,
    BrandNameConflictError,
    BrandNotFoundError,
)
from catalog.models.dto.brand import BrandCreate, BrandResponse, BrandUpdate
from catalog.models.dto.common import ApiResponse
from catalog.models.orm.user import User
from catalog.services import brand_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/brands", tags=["brands"])


async def valid_brand_id(id: str = Path(min_length=1, description="Brand ID")) -> str:
    brand_id = id.strip()
    if not brand_id:
        raise RequestValidationError([{
            "type": "string_too_short",
            "loc": ("path", "id"),
            "msg": "Brand ID is required",
            "input": id,
        }])
    return brand_id


async def _failure(
    db: AsyncSession, action: str, exc: Exception, status_code: int
) -> JSONResponse:
    logger.error("%s error: %s", action, exc, exc_info=exc)
    await db.rollback()
    return error_response(error_message(exc), status_code)


@router.get("", response_model=ApiResponse[list[BrandResponse]])
async def list_brands(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        brands = await brand_service.list_brands(db)
    except Exception as e:
        return await _failure(db, "Get brands", e, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return success_response(
        "Brands retrieved successfully",
        [BrandResponse.model_validate(b) for b in brands],
    )


@router.get("/{id}", response_model=ApiResponse[BrandResponse])
async def get_brand(
    user: User = Depends(get_current_user),
    brand_id: str = Depends(valid_brand_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        brand = await brand_service.get_brand(db, brand_id)
    except BrandNotFoundError as e:
        return await _failure(db, "Get brand", e, status.HTTP_404_NOT_FOUND)
    except Exception as e:
        return await _failure(db, "Get brand", e, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return success_response("Brand retrieved successfully", BrandResponse.model_validate(brand))


@router.post("", response_model=ApiResponse[BrandResponse], status_code=201)
async def create_brand(
    body: BrandCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    try:
        brand = await brand_service.create_brand(
            db, name=body.name, description=body.description
        )
    except BrandAlreadyExistsError as e:
        return await _failure(db, "Create brand", e, status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        return await _failure(db, "Create brand", e, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Brand created: %s by %s", brand.name, user.username)
    return success_response(
        "Brand created successfully",
        BrandResponse.model_validate(brand),
        status_code=status.HTTP_201_CREATED,
    )


@router.put("/{id}", response_model=ApiResponse[BrandResponse])
async def update_brand(
    body: BrandUpdate,
    user: User = Depends(get_current_user),
    brand_id: str = Depends(valid_brand_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        brand = await brand_service.update_brand(
            db, brand_id, body.model_dump(exclude_unset=True)
        )
    # Not-found on a write path is reported as 400, unlike GET
    except (BrandNotFoundError, BrandNameConflictError) as e:
        return await _failure(db, "Update brand", e, status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        return await _failure(db, "Update brand", e, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Brand updated: %s by %s", brand.name, user.username)
    return success_response("Brand updated successfully", BrandResponse.model_validate(brand))


@router.delete("/{id}", response_model=ApiResponse[None])
async def delete_brand(
    user: User = Depends(get_current_user),
    brand_id: str = Depends(valid_brand_id),
    db: AsyncSession = Depends(get_db),
):
    try:
        await brand_service.delete_brand(db, brand_id)
    except (BrandNotFoundError, BrandInUseError) as e:
        return await _failure(db, "Delete brand", e, status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        return await _failure(db, "Delete brand", e, status.HTTP_500_INTERNAL_SERVER_ERROR)

    logger.info("Brand deleted: %s by %s", brand_id, user.username)
    return success_response("Brand deleted successfully", None)
