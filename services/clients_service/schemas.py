import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from services.clients_service.models import Client, ClientStatus, ProgressCategory
from services.clients_service.services.membership import (
    compute_status_label,
    remaining_days,
)
from services.clients_service.services.schedule import DAYS_OF_WEEK, TIME_SLOTS


# --- Client Schemas ---


class ClientResponse(BaseModel):
    id: uuid.UUID
    membership_code: str
    full_name: str
    email: str
    phone_number: str
    plan: str
    primary_goal: Optional[str] = None
    notes: Optional[str] = None
    start_date: date
    end_date: date
    status: ClientStatus
    days_left_on_pause: Optional[int] = None
    current_goal_title: Optional[str] = None
    target_metric: Optional[str] = None
    target_value: Optional[str] = None
    target_date: Optional[date] = None
    nutrition_plan_url: Optional[str] = None
    training_program_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    # Derived, not stored
    days_left: int = 0
    status_label: str = "active"

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_client(cls, client: Client, today: Optional[date] = None) -> "ClientResponse":
        response = cls.model_validate(client)
        response.days_left = remaining_days(client, today)
        response.status_label = compute_status_label(client.status, response.days_left)
        return response


class GoalUpdate(BaseModel):
    current_goal_title: str = Field(..., min_length=3, max_length=50)
    target_metric: str = Field(..., min_length=2, max_length=50)
    target_value: str = Field(..., min_length=1, max_length=20)
    target_date: date

    model_config = ConfigDict(extra="forbid")


class ResourcesUpdate(BaseModel):
    """Links to the client's plans. An empty string clears a link."""

    nutrition_plan_url: Optional[HttpUrl] = None
    training_program_url: Optional[HttpUrl] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("nutrition_plan_url", "training_program_url", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ExtendRequest(BaseModel):
    months: Optional[int] = Field(default=None, ge=1, le=24)
    days: Optional[int] = Field(default=None, ge=1, le=366)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def exactly_one_unit(self):
        if (self.months is None) == (self.days is None):
            raise ValueError("Provide either months or days")
        return self


# --- Progress Log Schemas ---


class ProgressLogCreate(BaseModel):
    note: str = Field(..., min_length=5, max_length=500)
    category: ProgressCategory = ProgressCategory.GENERAL

    model_config = ConfigDict(extra="forbid")


class ProgressLogResponse(BaseModel):
    id: uuid.UUID
    client_id: uuid.UUID
    note: str
    category: ProgressCategory
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- Weekly Schedule Schemas ---


class WeeklySchedule(BaseModel):
    """``{day: {time: client_id}}``; empty or null cells are allowed and dropped."""

    schedule: dict[str, dict[str, Optional[str]]] = Field(default_factory=dict)

    @field_validator("schedule")
    @classmethod
    def known_days_and_slots(cls, value: dict[str, dict[str, Optional[str]]]):
        for day, slots in value.items():
            if day not in DAYS_OF_WEEK:
                raise ValueError(f"Unknown day: {day}")
            for time in slots:
                if time not in TIME_SLOTS:
                    raise ValueError(f"Unknown time slot: {time}")
        return value


class WeeklyScheduleResponse(BaseModel):
    days: list[str] = Field(default_factory=lambda: list(DAYS_OF_WEEK))
    time_slots: list[str] = Field(default_factory=lambda: list(TIME_SLOTS))
    schedule: dict[str, dict[str, str]]


# --- Membership Lookup Schemas ---


class ScheduleSlot(BaseModel):
    day: str
    time: str


class MembershipLookupResponse(BaseModel):
    """Public view of a membership, serialized in camelCase."""

    found: bool
    full_name: Optional[str] = None
    plan: Optional[str] = None
    end_date: Optional[date] = None
    status: Optional[ClientStatus] = None
    days_left: Optional[int] = None
    status_label: Optional[str] = None
    current_goal_title: Optional[str] = None
    target_metric: Optional[str] = None
    target_value: Optional[str] = None
    target_date: Optional[date] = None
    schedule: Optional[list[ScheduleSlot]] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
