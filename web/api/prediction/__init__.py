"""Prediction API."""

from web.api.prediction.views import get_model_info, get_prediction, get_prediction_from_counts

__all__ = [
    "get_prediction",
    "get_prediction_from_counts",
    "get_model_info",
]
