import uuid
from datetime import datetime
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base, enum_values
from services.orders_service.models.enums import (
    ExperienceLevel,
    OrderStatus,
    PrimaryGoal,
    PromoCodeStatus,
)
from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column


class PromoCode(Base):
    """Single-use percentage discount code.

    Moves from ``active`` to ``used`` exactly once, inside the order approval
    transaction.
    """

    __tablename__ = "promo_codes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(
        String(20), unique=True, index=True, nullable=False
    )
    discount_percentage: Mapped[int] = mapped_column(Integer, nullable=False)

    status: Mapped[PromoCodeStatus] = mapped_column(
        SAEnum(
            PromoCodeStatus,
            name="promo_code_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=PromoCodeStatus.ACTIVE,
        nullable=False,
    )
    used_by_order_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    used_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )

    def __repr__(self):
        return f"<PromoCode {self.code} ({self.status.value})>"


class Order(Base):
    """Pending subscription application submitted from the public form."""

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Profile
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    height: Mapped[float] = mapped_column(nullable=False)  # cm
    weight: Mapped[float] = mapped_column(nullable=False)  # kg
    experience_level: Mapped[ExperienceLevel] = mapped_column(
        SAEnum(
            ExperienceLevel,
            name="experience_level_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )
    primary_goal: Mapped[PrimaryGoal] = mapped_column(
        SAEnum(
            PrimaryGoal,
            name="primary_goal_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        nullable=False,
    )
    other_goal: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    injuries_or_notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Subscription
    preferred_plan: Mapped[str] = mapped_column(String(100), nullable=False)
    subscription_duration: Mapped[int] = mapped_column(
        Integer, nullable=False
    )  # months
    promo_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    final_price: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    status: Mapped[OrderStatus] = mapped_column(
        SAEnum(
            OrderStatus,
            name="order_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=OrderStatus.PENDING,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )

    def __repr__(self):
        return f"<Order {self.full_name} ({self.preferred_plan})>"
