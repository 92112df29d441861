"""Models package - domain entities."""

from app.models.common import BaseEntity
from app.models.prediction import (
    CategoryBreakdown,
    ModelComparison,
    PredictionResult,
    QueryPrediction,
)

__all__ = [
    # Common
    "BaseEntity",
    # Prediction
    "CategoryBreakdown",
    "PredictionResult",
    "ModelComparison",
    "QueryPrediction",
]
