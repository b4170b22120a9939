"""Gallery and achievements: public showcase listing and admin CRUD.

Both collections share the same shape (image, caption, visibility, position),
so the handlers delegate to a few helpers parameterised by model.
"""

import uuid
from typing import Type, Union

from fastapi import APIRouter, Depends
from libs.auth.dependencies import require_admin
from libs.auth.models import AuthUser
from libs.common.errors import NotFoundError
from libs.db.session import get_async_db
from pydantic import BaseModel
from services.catalog_service.models import Achievement, GalleryItem
from services.catalog_service.schemas import (
    AchievementCreate,
    AchievementResponse,
    AchievementUpdate,
    GalleryItemCreate,
    GalleryItemResponse,
    GalleryItemUpdate,
)
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(tags=["showcase"])

ShowcaseModel = Union[Type[GalleryItem], Type[Achievement]]


async def _list_items(db: AsyncSession, model: ShowcaseModel, visible_only: bool):
    query = select(model).order_by(model.position, model.created_at)
    if visible_only:
        query = query.where(model.visible.is_(True))
    result = await db.execute(query)
    return result.scalars().all()


async def _create_item(db: AsyncSession, model: ShowcaseModel, payload: BaseModel):
    # New items go to the end of the grid
    count = await db.scalar(select(func.count()).select_from(model))
    item = model(**payload.model_dump(mode="json"), visible=True, position=count or 0)
    db.add(item)
    await db.commit()
    await db.refresh(item)
    return item


async def _get_item_or_404(db: AsyncSession, model: ShowcaseModel, item_id: uuid.UUID):
    item = await db.get(model, item_id)
    if not item:
        label = "Gallery item" if model is GalleryItem else "Achievement"
        raise NotFoundError(f"{label} not found")
    return item


async def _update_item(
    db: AsyncSession, model: ShowcaseModel, item_id: uuid.UUID, payload: BaseModel
):
    item = await _get_item_or_404(db, model, item_id)
    for field, value in payload.model_dump(mode="json", exclude_unset=True).items():
        setattr(item, field, value)
    await db.commit()
    await db.refresh(item)
    return item


async def _delete_item(db: AsyncSession, model: ShowcaseModel, item_id: uuid.UUID):
    item = await _get_item_or_404(db, model, item_id)
    await db.delete(item)
    await db.commit()
    return {"deleted": True}


# ---------------------------------------------------------------------------
# Gallery
# ---------------------------------------------------------------------------


@router.get("/gallery", response_model=list[GalleryItemResponse])
async def list_gallery(db: AsyncSession = Depends(get_async_db)):
    return await _list_items(db, GalleryItem, visible_only=True)


@router.get("/admin/gallery", response_model=list[GalleryItemResponse])
async def admin_list_gallery(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _list_items(db, GalleryItem, visible_only=False)


@router.post("/admin/gallery", response_model=GalleryItemResponse, status_code=201)
async def create_gallery_item(
    payload: GalleryItemCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _create_item(db, GalleryItem, payload)


@router.patch("/admin/gallery/{item_id}", response_model=GalleryItemResponse)
async def update_gallery_item(
    item_id: uuid.UUID,
    payload: GalleryItemUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _update_item(db, GalleryItem, item_id, payload)


@router.delete("/admin/gallery/{item_id}")
async def delete_gallery_item(
    item_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _delete_item(db, GalleryItem, item_id)


# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------


@router.get("/achievements", response_model=list[AchievementResponse])
async def list_achievements(db: AsyncSession = Depends(get_async_db)):
    return await _list_items(db, Achievement, visible_only=True)


@router.get("/admin/achievements", response_model=list[AchievementResponse])
async def admin_list_achievements(
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _list_items(db, Achievement, visible_only=False)


@router.post(
    "/admin/achievements", response_model=AchievementResponse, status_code=201
)
async def create_achievement(
    payload: AchievementCreate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _create_item(db, Achievement, payload)


@router.patch("/admin/achievements/{item_id}", response_model=AchievementResponse)
async def update_achievement(
    item_id: uuid.UUID,
    payload: AchievementUpdate,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _update_item(db, Achievement, item_id, payload)


@router.delete("/admin/achievements/{item_id}")
async def delete_achievement(
    item_id: uuid.UUID,
    current_user: AuthUser = Depends(require_admin),
    db: AsyncSession = Depends(get_async_db),
):
    return await _delete_item(db, Achievement, item_id)
