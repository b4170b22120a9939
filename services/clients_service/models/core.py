import uuid
from datetime import date, datetime
from typing import Optional

from libs.common.datetime_utils import utc_now
from libs.db.base import Base, JSONType, enum_values
from services.clients_service.models.enums import ClientStatus, ProgressCategory
from sqlalchemy import Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column


class Client(Base):
    """An approved, paying roster member.

    Created only by order approval. ``membership_code`` is derived from the id
    at creation and never changes.
    """

    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    membership_code: Mapped[str] = mapped_column(
        String(8), unique=True, index=True, nullable=False
    )

    # Profile (copied from the order)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False)
    plan: Mapped[str] = mapped_column(String(100), nullable=False)
    primary_goal: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Subscription window
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[ClientStatus] = mapped_column(
        SAEnum(
            ClientStatus,
            name="client_status_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=ClientStatus.ACTIVE,
        nullable=False,
    )
    # Remaining days frozen while paused
    days_left_on_pause: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Current goal
    current_goal_title: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    target_metric: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    target_value: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    target_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Resources
    nutrition_plan_url: Mapped[Optional[str]] = mapped_column(
        String(1024), nullable=True
    )
    training_program_url: Mapped[Optional[str]] = mapped_column(
        String(1024), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    def __repr__(self):
        return f"<Client {self.membership_code} {self.full_name}>"


class ProgressLog(Base):
    __tablename__ = "progress_logs"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("clients.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    note: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[ProgressCategory] = mapped_column(
        SAEnum(
            ProgressCategory,
            name="progress_category_enum",
            values_callable=enum_values,
            validate_strings=True,
        ),
        default=ProgressCategory.GENERAL,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )


class AppData(Base):
    """Key/value documents holding global singletons such as the weekly schedule."""

    __tablename__ = "app_data"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[dict] = mapped_column(JSONType, default=dict, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )
