"""Enum definitions for clients service models."""

import enum


class ClientStatus(str, enum.Enum):
    ACTIVE = "active"
    PAUSED = "paused"


class ProgressCategory(str, enum.Enum):
    PROGRESS = "progress"
    SETBACK = "setback"
    HEALTH = "health"
    GENERAL = "general"
