"""Common models."""

from app.models.common.base import BaseEntity

__all__ = [
    "BaseEntity",
]
