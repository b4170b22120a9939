"""Enum definitions for orders service models."""

import enum


class PromoCodeStatus(str, enum.Enum):
    ACTIVE = "active"
    USED = "used"


class OrderStatus(str, enum.Enum):
    # Orders are deleted once approved or rejected, so pending is the only
    # persisted state.
    PENDING = "pending"


class ExperienceLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PrimaryGoal(str, enum.Enum):
    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    OTHER = "other"
