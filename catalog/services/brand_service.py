import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import (
    BrandAlreadyExistsError,
    BrandInUseError,
    BrandNameConflictError,
    BrandNotFoundError,
)
from catalog.models.orm.brand import Brand
from catalog.models.orm.product import Product

logger = logging.getLogger(__name__)


def _clean_description(value: str | None) -> str | None:
    """Trim a description; blank values are stored as NULL."""
    if value is None:
        return None
    return value.strip() or None


async def _get_by_name(db: AsyncSession, name: str) -> Brand | None:
    result = await db.execute(select(Brand).where(Brand.name == name))
    return result.scalar_one_or_none()


async def list_brands(db: AsyncSession) -> list[Brand]:
    result = await db.execute(select(Brand).order_by(Brand.created_at.desc()))
    return list(result.scalars().all())


async def get_brand(db: AsyncSession, brand_id: str) -> Brand:
    brand = await db.get(Brand, brand_id)
    if not brand:
        raise BrandNotFoundError()
    return brand


async def create_brand(
    db: AsyncSession, *, name: str, description: str | None = None
) -> Brand:
    name = name.strip()
    if await _get_by_name(db, name):
        raise BrandAlreadyExistsError()

    brand = Brand(name=name, description=_clean_description(description))
    db.add(brand)
    try:
        await db.flush()
    except IntegrityError as e:
        # Lost a race with a concurrent insert of the same name
        await db.rollback()
        logger.warning("Unique constraint rejected brand %r: %s", name, e.orig)
        raise BrandAlreadyExistsError() from e
    await db.refresh(brand)
    return brand


async def update_brand(
    db: AsyncSession, brand_id: str, changes: dict[str, Any]
) -> Brand:
    """Apply a partial update. Only keys present in ``changes`` are written."""
    brand = await db.get(Brand, brand_id)
    if not brand:
        raise BrandNotFoundError()

    # A blank name is never written; the column requires a non-empty value
    name = (changes.get("name") or "").strip()
    if name and name != brand.name:
        if await _get_by_name(db, name):
            raise BrandNameConflictError()
        brand.name = name

    if "description" in changes:
        brand.description = _clean_description(changes["description"])

    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("Unique constraint rejected brand rename to %r: %s", name, e.orig)
        raise BrandNameConflictError() from e
    await db.refresh(brand)
    return brand


async def count_products(db: AsyncSession, brand_id: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(Product).where(Product.brand_id == brand_id)
    )
    return result.scalar() or 0


async def delete_brand(db: AsyncSession, brand_id: str) -> None:
    brand = await db.get(Brand, brand_id)
    if not brand:
        raise BrandNotFoundError()

    product_count = await count_products(db, brand_id)
    if product_count > 0:
        raise BrandInUseError(product_count)

    await db.delete(brand)
    await db.flush()
