import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator


def _split_features(value):
    """Accept features as a list or as newline-separated text."""
    if isinstance(value, str):
        value = value.split("\n")
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    return value


def _reject_null(value):
    """Partial updates may omit a field but not null out a required column."""
    if value is None:
        raise ValueError("This field cannot be null")
    return value


# --- Pricing Schemas ---


class PricingPlanBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    price: int = Field(..., ge=0)
    duration_days: int = Field(..., ge=1)
    features: list[str] = Field(default_factory=list)
    most_popular: bool = False

    model_config = ConfigDict(extra="forbid")

    _normalize_features = field_validator("features", mode="before")(_split_features)


class PricingPlanCreate(PricingPlanBase):
    pass


class PricingPlanUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    price: Optional[int] = Field(default=None, ge=0)
    duration_days: Optional[int] = Field(default=None, ge=1)
    features: Optional[list[str]] = None
    most_popular: Optional[bool] = None

    model_config = ConfigDict(extra="forbid")

    _normalize_features = field_validator("features", mode="before")(_split_features)
    _not_null = field_validator(
        "name", "price", "duration_days", "features", "most_popular"
    )(_reject_null)


class PricingPlanResponse(PricingPlanBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Gallery / Achievement Schemas ---


class GalleryItemCreate(BaseModel):
    image_url: HttpUrl
    caption: str = Field(..., min_length=2, max_length=255)

    model_config = ConfigDict(extra="forbid")


class GalleryItemUpdate(BaseModel):
    image_url: Optional[HttpUrl] = None
    caption: Optional[str] = Field(default=None, min_length=2, max_length=255)
    visible: Optional[bool] = None
    position: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")

    _not_null = field_validator("image_url", "caption", "visible", "position")(
        _reject_null
    )


class GalleryItemResponse(BaseModel):
    id: uuid.UUID
    image_url: str
    caption: str
    visible: bool
    position: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AchievementCreate(GalleryItemCreate):
    transformation_period: Optional[int] = Field(default=None, ge=1)


class AchievementUpdate(GalleryItemUpdate):
    transformation_period: Optional[int] = Field(default=None, ge=1)


class AchievementResponse(GalleryItemResponse):
    transformation_period: Optional[int] = None
