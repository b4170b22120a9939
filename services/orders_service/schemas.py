import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    computed_field,
    field_validator,
    model_validator,
)
from services.orders_service.models import (
    ExperienceLevel,
    OrderStatus,
    PrimaryGoal,
    PromoCodeStatus,
)
from services.orders_service.services.pricing import describe_duration


# --- Promo Code Schemas ---


class PromoCodeCreate(BaseModel):
    # Omit the code to have one generated
    code: Optional[str] = Field(default=None, min_length=4, max_length=20)
    discount_percentage: int = Field(..., ge=1, le=100)

    model_config = ConfigDict(extra="forbid")

    @field_validator("code", mode="before")
    @classmethod
    def strip_code(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class PromoCodeResponse(BaseModel):
    id: uuid.UUID
    code: str
    discount_percentage: int
    status: PromoCodeStatus
    used_by_order_id: Optional[uuid.UUID] = None
    used_at: Optional[datetime] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PromoCodeValidateRequest(BaseModel):
    code: str = ""


class PromoCodeValidateResponse(BaseModel):
    success: bool
    promo_code: Optional[PromoCodeResponse] = None
    message: str


# --- Order Schemas ---


class SubscriptionOrderCreate(BaseModel):
    """Public subscription form."""

    full_name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    phone_number: str = Field(..., min_length=10, max_length=32)
    age: int = Field(..., ge=16, le=100)
    height: float = Field(..., ge=100, le=250)  # cm
    weight: float = Field(..., ge=30, le=300)  # kg
    experience_level: ExperienceLevel
    primary_goal: PrimaryGoal
    other_goal: Optional[str] = Field(default=None, max_length=255)
    injuries_or_notes: Optional[str] = Field(default=None, max_length=2000)
    preferred_plan: str = Field(..., min_length=1, max_length=100)
    subscription_duration: int = Field(..., ge=1)
    promo_code: Optional[str] = Field(default=None, max_length=20)
    # Price shown to the visitor; the server recomputes the authoritative value.
    final_price: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def require_other_goal(self):
        if self.primary_goal == PrimaryGoal.OTHER and not (
            self.other_goal and self.other_goal.strip()
        ):
            raise ValueError("Please specify your goal.")
        return self


class SubscriptionOrderResult(BaseModel):
    success: bool
    message: str
    order_id: Optional[uuid.UUID] = None
    final_price: Optional[int] = None


class OrderResponse(BaseModel):
    id: uuid.UUID
    full_name: str
    email: str
    phone_number: str
    age: int
    height: float
    weight: float
    experience_level: ExperienceLevel
    primary_goal: PrimaryGoal
    other_goal: Optional[str] = None
    injuries_or_notes: Optional[str] = None
    preferred_plan: str
    subscription_duration: int
    promo_code: Optional[str] = None
    final_price: Optional[int] = None
    status: OrderStatus
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def duration_label(self) -> str:
        return describe_duration(self.subscription_duration)


class OrderApprovalRequest(BaseModel):
    # Defaults to today in the business timezone
    start_date: Optional[date] = None

    model_config = ConfigDict(extra="forbid")
