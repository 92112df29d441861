"""Prediction API response schemas."""

from pydantic import BaseModel


class CategoryItem(BaseModel):
    """Outcome shares in percent."""

    verified: float
    verified_with_error: float
    needs_review: float
    unverified: float


class ModelPrediction(BaseModel):
    """One model's prediction with display fields."""

    rate: float
    margin: float
    rate_pct: int
    margin_pp: int
    ceiling_effect: bool
    rate_label: str
    margin_label: str
    categories: CategoryItem
    risk_level: str
    advisory: str


class PredictionResponse(BaseModel):
    """Flagship and small model predictions for one query."""

    topic: str | None
    country: str | None
    topic_volume: int
    country_volume: int
    topic_volume_label: str
    country_volume_label: str
    flagship: ModelPrediction
    small: ModelPrediction


class CoefficientsItem(BaseModel):
    """Linear model coefficients."""

    intercept: float
    log_topic: float
    is_small: float
    log_country: float


class ModelInfoResponse(BaseModel):
    """Regression model metadata."""

    sample_size: int
    r_squared: float
    overall: CoefficientsItem
    categories: dict[str, CoefficientsItem]
