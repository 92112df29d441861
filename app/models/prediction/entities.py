"""Prediction domain entities - engine results."""

from dataclasses import dataclass

from app.models.common import BaseEntity
from src.model import RiskLevel


@dataclass(frozen=True)
class CategoryBreakdown(BaseEntity):
    """Outcome shares in percent, summing to 100 (or all 0 when degenerate)."""

    verified: float
    verified_with_error: float
    needs_review: float
    unverified: float


@dataclass(frozen=True)
class PredictionResult(BaseEntity):
    """Engine output for one (topic volume, country volume, model size) input."""

    rate: float
    margin: float
    categories: CategoryBreakdown
    risk_level: RiskLevel
    advisory: str


@dataclass(frozen=True)
class ModelComparison(BaseEntity):
    """Flagship and small model predictions for the same volumes."""

    flagship: PredictionResult
    small: PredictionResult


@dataclass(frozen=True)
class QueryPrediction(BaseEntity):
    """Predictions for a looked-up topic and country."""

    topic: str
    country: str
    topic_volume: int
    country_volume: int
    flagship: PredictionResult
    small: PredictionResult
