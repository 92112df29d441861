"""Prediction domain models."""

from app.models.prediction.entities import CategoryBreakdown, ModelComparison, PredictionResult, QueryPrediction

__all__ = [
    "CategoryBreakdown",
    "PredictionResult",
    "ModelComparison",
    "QueryPrediction",
]
