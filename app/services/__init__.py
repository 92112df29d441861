"""Services package - service class exports."""

from app.services.prediction.service import PredictionService

__all__ = [
    "PredictionService",
]
