"""Prediction services."""

from app.services.prediction.service import PredictionService

__all__ = [
    "PredictionService",
]
